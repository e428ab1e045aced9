"""
Value types for the grade engine.

This module contains only dataclasses and named tuples with NO engine imports
to avoid circular dependencies.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple, Optional


@dataclass(frozen=True)
class Sample:
    """
    One position + elevation fix supplied by the tracking layer.

    vertical_accuracy is the estimated vertical error in meters;
    a negative value means the accuracy is unknown.
    """
    latitude: float
    longitude: float
    altitude: float
    vertical_accuracy: float = -1.0
    timestamp: Optional[datetime] = None
    barometric_altitude: Optional[float] = None

    @property
    def elevation(self) -> float:
        """Best available elevation: barometric/fused if present, else GPS."""
        if self.barometric_altitude is not None:
            return self.barometric_altitude
        return self.altitude


@dataclass(frozen=True)
class GradeResult:
    """Grade computed from one consecutive sample pair."""
    instant_grade: float        # %, multiple of 0.5
    smoothed_grade: float       # %, multiple of 0.5
    confidence: float           # 0-1
    distance: float             # meters between the two samples
    elevation_change: float     # meters, signed
    timestamp: Optional[datetime] = None


class ElevationMetrics(NamedTuple):
    """Cumulative elevation gain and loss in meters."""
    gain: float
    loss: float


class AverageGrade(NamedTuple):
    """Distance-weighted average grade over a sequence of samples."""
    grade: float
    confidence: float


class GradeStatistics(NamedTuple):
    """Summary of instant grades currently held in history."""
    min: float
    max: float
    average: float
    variance: float
