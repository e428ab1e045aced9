"""
Cumulative elevation gain/loss with a noise threshold.

Runs independently of the grade history and may be fed from a different
(e.g. fused barometric) elevation source.
"""

from typing import Optional

from trekgrade.shared.constants import MIN_ELEVATION_CONFIDENCE

from .models import ElevationMetrics


class ElevationAccumulator:
    """
    Tracks total gain and loss, ignoring changes below noise_threshold.

    A sub-threshold change is dropped entirely: it neither accumulates nor
    moves the reference elevation, so oscillation around a point adds nothing
    no matter how many samples arrive. A slow climb still registers once it
    has drifted noise_threshold away from the last accepted elevation.
    """

    def __init__(self, noise_threshold: float):
        self.noise_threshold = noise_threshold
        self.last_valid_elevation: Optional[float] = None
        self.cumulative_gain = 0.0
        self.cumulative_loss = 0.0

    @property
    def metrics(self) -> ElevationMetrics:
        return ElevationMetrics(self.cumulative_gain, self.cumulative_loss)

    def update(self, elevation: float, confidence: float) -> bool:
        """
        Offer a new elevation reading.

        Args:
            elevation: Elevation in meters
            confidence: Confidence of the reading (0-1); <= 0.5 is ignored

        Returns:
            True if the reading was accepted (seeded or accumulated)
        """
        if confidence <= MIN_ELEVATION_CONFIDENCE:
            return False

        if self.last_valid_elevation is None:
            self.last_valid_elevation = elevation
            return True

        change = elevation - self.last_valid_elevation
        if abs(change) < self.noise_threshold:
            return False

        if change > 0:
            self.cumulative_gain += change
        else:
            self.cumulative_loss += abs(change)
        self.last_valid_elevation = elevation
        return True

    def reset(self) -> None:
        self.last_valid_elevation = None
        self.cumulative_gain = 0.0
        self.cumulative_loss = 0.0
