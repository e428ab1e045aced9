"""
Mathematical formulas for grade calculations.

These formulas are used by the grade engine and the replay service.
Centralizing them here eliminates duplication and ensures consistency.
"""

import math

from .constants import GRADE_PRECISION


def grade_percent(elevation_change_m: float, distance_m: float) -> float:
    """
    Calculate grade as percentage.

    Args:
        elevation_change_m: Signed elevation change in meters
        distance_m: Horizontal distance in meters

    Returns:
        Grade in percent (10.0 = 10%), 0.0 for non-positive distance
    """
    if distance_m <= 0:
        return 0.0
    return (elevation_change_m / distance_m) * 100


def clamp(value: float, lower: float, upper: float) -> float:
    """Bound value to [lower, upper]."""
    return max(lower, min(upper, value))


def round_to_precision(value: float, precision: float = GRADE_PRECISION) -> float:
    """
    Round to the nearest multiple of precision, halves away from zero.

    Python's round() uses banker's rounding, which would report 2.25 as 2.0;
    grades round 2.25 -> 2.5 and -2.25 -> -2.5.

    Args:
        value: Value to round
        precision: Step size (0.5 by default)

    Returns:
        Rounded value (never negative zero)
    """
    steps = math.floor(abs(value) / precision + 0.5)
    return math.copysign(steps * precision, value) + 0.0


def population_variance(values: list[float]) -> float:
    """Population variance (divides by N). 0.0 for an empty list."""
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)
