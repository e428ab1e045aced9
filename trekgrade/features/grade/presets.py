"""
Grade engine configuration presets.

Each preset trades precision against responsiveness and CPU/battery cost.
A configuration is immutable: switching presets means creating a new engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from trekgrade.shared.constants import GRADE_PRECISION


class GradePreset(str, Enum):
    """Named configuration presets."""
    PRECISE = "precise"     # Short baselines, wide smoothing window
    BALANCED = "balanced"   # Default for live tracking
    FAST = "fast"           # Long baselines, no smoothing


@dataclass(frozen=True)
class GradeConfiguration:
    """
    Thresholds for one grade engine instance.

    Attributes:
        min_distance_for_grade: Below this horizontal separation (m) no grade
            is computed, GPS noise dominates at short range
        min_elevation_change: Elevation deltas (m) below this are sensor noise
        smoothing_window_size: Max number of recent results the smoother reads
        max_grade_percent: Hard clamp on reported grade (%)
        grade_noise_threshold: Elevation change (m) the gain/loss accumulator
            treats as real

    Raises:
        ValueError: On a non-positive distance or window, negative
            thresholds, or a max grade off the 0.5% grid
    """
    min_distance_for_grade: float
    min_elevation_change: float
    smoothing_window_size: int
    max_grade_percent: float
    grade_noise_threshold: float

    def __post_init__(self):
        if self.min_distance_for_grade <= 0:
            raise ValueError(
                f"min_distance_for_grade must be > 0, got {self.min_distance_for_grade}"
            )
        if self.min_elevation_change < 0:
            raise ValueError(
                f"min_elevation_change must be >= 0, got {self.min_elevation_change}"
            )
        if self.smoothing_window_size < 1:
            raise ValueError(
                f"smoothing_window_size must be >= 1, got {self.smoothing_window_size}"
            )
        # Grades are quantized after clamping, so the clamp must lie on the grid
        if (
            self.max_grade_percent <= 0
            or not float(self.max_grade_percent / GRADE_PRECISION).is_integer()
        ):
            raise ValueError(
                f"max_grade_percent must be a positive multiple of {GRADE_PRECISION}, "
                f"got {self.max_grade_percent}"
            )
        if self.grade_noise_threshold < 0:
            raise ValueError(
                f"grade_noise_threshold must be >= 0, got {self.grade_noise_threshold}"
            )

    @classmethod
    def from_preset(
        cls,
        preset: Union[GradePreset, str] = GradePreset.BALANCED
    ) -> "GradeConfiguration":
        """
        Look up a preset configuration.

        Args:
            preset: GradePreset member or its string value ("balanced")

        Returns:
            The shared, immutable configuration for that preset

        Raises:
            ValueError: If the preset name is unknown
        """
        try:
            key = GradePreset(preset)
        except ValueError:
            names = ", ".join(p.value for p in GradePreset)
            raise ValueError(f"Unknown grade preset '{preset}' (expected one of: {names})")
        return GRADE_PRESETS[key]


GRADE_PRESETS = {
    GradePreset.PRECISE: GradeConfiguration(
        min_distance_for_grade=5.0,
        min_elevation_change=0.1,
        smoothing_window_size=5,
        max_grade_percent=100.0,
        grade_noise_threshold=0.5,
    ),
    GradePreset.BALANCED: GradeConfiguration(
        min_distance_for_grade=10.0,
        min_elevation_change=0.25,
        smoothing_window_size=3,
        max_grade_percent=50.0,
        grade_noise_threshold=1.0,
    ),
    GradePreset.FAST: GradeConfiguration(
        min_distance_for_grade=20.0,
        min_elevation_change=0.5,
        smoothing_window_size=1,
        max_grade_percent=30.0,
        grade_noise_threshold=2.0,
    ),
}
