"""
Confidence scoring for grade estimates.

Confidence is the product of a distance term (longer baselines shrink the
relative impact of GPS error on the grade ratio) and a discrete vertical
accuracy tier.
"""

from trekgrade.shared.constants import (
    ACCURACY_CONFIDENCE_TIERS,
    CONFIDENCE_FULL_DISTANCE_M,
    POOR_ACCURACY_CONFIDENCE,
    UNKNOWN_ACCURACY_CONFIDENCE,
)


def distance_confidence(distance_m: float) -> float:
    """Linear ramp from 0 at 0 m to 1.0 at 50 m and beyond."""
    return min(1.0, distance_m / CONFIDENCE_FULL_DISTANCE_M)


def accuracy_confidence(elevation_accuracy_m: float) -> float:
    """
    Map vertical accuracy to a confidence tier.

    Args:
        elevation_accuracy_m: Estimated vertical error (negative = unknown)

    Returns:
        0.5 unknown, 1.0 (<=1 m), 0.8 (<=5 m), 0.6 (<=10 m), 0.3 otherwise
    """
    if elevation_accuracy_m < 0:
        return UNKNOWN_ACCURACY_CONFIDENCE

    for upper_bound, confidence in ACCURACY_CONFIDENCE_TIERS:
        if elevation_accuracy_m <= upper_bound:
            return confidence

    return POOR_ACCURACY_CONFIDENCE


def calculate_confidence(distance_m: float, elevation_accuracy_m: float) -> float:
    """
    Confidence (0-1) of a grade measured over distance_m.

    Args:
        distance_m: Horizontal distance between the two samples
        elevation_accuracy_m: The worse vertical accuracy of the two samples

    Returns:
        distance_confidence * accuracy_confidence
    """
    return distance_confidence(distance_m) * accuracy_confidence(elevation_accuracy_m)
