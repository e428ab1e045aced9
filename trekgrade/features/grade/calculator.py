"""
Grade Calculator

Turns consecutive position/elevation samples into a clamped, 0.5%-quantized
grade with a confidence score, keeps a bounded history for smoothing, and
tracks cumulative elevation gain/loss on a separate channel.

One instance per tracking session. All mutable state (history and the
elevation accumulator) is owned by the instance and guarded by a lock, so
concurrent callers never see a partially applied update.
"""

import logging
import threading
from typing import Optional, Sequence, Union

from trekgrade.shared.constants import MAX_HISTORY_SIZE, MIN_AVERAGE_CONFIDENCE
from trekgrade.shared.formulas import clamp, grade_percent, round_to_precision
from trekgrade.shared.geo import haversine_m

from .accumulator import ElevationAccumulator
from .confidence import calculate_confidence
from .history import GradeHistory
from .models import (
    AverageGrade,
    ElevationMetrics,
    GradeResult,
    GradeStatistics,
    Sample,
)
from .multiplier import GradeMultiplier
from .presets import GradeConfiguration, GradePreset

logger = logging.getLogger(__name__)


class GradeCalculator:
    """
    Real-time grade engine.

    Example usage:
        calc = GradeCalculator(GradePreset.BALANCED)
        result = calc.calculate_grade(previous_sample, sample)
        calc.update_elevation_metrics(fused_elevation, fused_confidence)
        multiplier = calc.get_grade_multiplier(result.smoothed_grade)

    Invalid input never raises: short baselines and sub-threshold elevation
    changes come back as zero-grade results so the stream stays available to
    downstream calorie calculations.
    """

    def __init__(
        self,
        configuration: Union[GradeConfiguration, GradePreset, str] = GradePreset.BALANCED
    ):
        """
        Initialize grade calculator.

        Args:
            configuration: A GradeConfiguration, or a preset (member or name).
                          Fixed for the lifetime of the instance.
        """
        if not isinstance(configuration, GradeConfiguration):
            configuration = GradeConfiguration.from_preset(configuration)

        self._configuration = configuration
        self._history = GradeHistory(MAX_HISTORY_SIZE)
        self._accumulator = ElevationAccumulator(configuration.grade_noise_threshold)
        # Re-entrant: average_grade() and calculate_grade() call
        # get_smoothed_grade() while already holding it
        self._lock = threading.RLock()

    @property
    def configuration(self) -> GradeConfiguration:
        return self._configuration

    @property
    def history_length(self) -> int:
        """Number of accepted results currently held (<= 100)."""
        with self._lock:
            return len(self._history)

    @property
    def elevation_metrics(self) -> ElevationMetrics:
        """Snapshot of cumulative (gain, loss) in meters."""
        with self._lock:
            return self._accumulator.metrics

    # =========================================================================
    # Grade
    # =========================================================================

    def calculate_grade(
        self,
        start: Sample,
        end: Sample,
        start_elevation: Optional[float] = None,
        end_elevation: Optional[float] = None,
    ) -> GradeResult:
        """
        Calculate grade between two samples.

        Only a result that passes both the distance and the elevation-change
        thresholds is added to history. Rejected pairs still report the
        smoothed grade of the existing history.

        Args:
            start: Earlier sample
            end: Later sample
            start_elevation: Override for start.elevation (e.g. a fused value)
            end_elevation: Override for end.elevation

        Returns:
            GradeResult stamped with end.timestamp
        """
        config = self._configuration

        start_elev = start_elevation if start_elevation is not None else start.elevation
        end_elev = end_elevation if end_elevation is not None else end.elevation

        distance = haversine_m(
            start.latitude, start.longitude,
            end.latitude, end.longitude
        )

        with self._lock:
            if distance < config.min_distance_for_grade:
                logger.debug(
                    f"Grade skipped: distance {distance:.1f}m < "
                    f"{config.min_distance_for_grade}m"
                )
                return GradeResult(
                    instant_grade=0.0,
                    smoothed_grade=self.get_smoothed_grade(),
                    confidence=0.0,
                    distance=distance,
                    elevation_change=0.0,
                    timestamp=end.timestamp,
                )

            elevation_change = end_elev - start_elev
            confidence = calculate_confidence(
                distance,
                max(start.vertical_accuracy, end.vertical_accuracy)
            )

            if abs(elevation_change) < config.min_elevation_change:
                logger.debug(
                    f"Grade flat: elevation change {elevation_change:+.2f}m "
                    f"below {config.min_elevation_change}m noise floor"
                )
                return GradeResult(
                    instant_grade=0.0,
                    smoothed_grade=self.get_smoothed_grade(),
                    confidence=confidence,
                    distance=distance,
                    elevation_change=0.0,
                    timestamp=end.timestamp,
                )

            instant_grade = round_to_precision(clamp(
                grade_percent(elevation_change, distance),
                -config.max_grade_percent,
                config.max_grade_percent,
            ))

            self._history.append(GradeResult(
                instant_grade=instant_grade,
                smoothed_grade=0.0,
                confidence=confidence,
                distance=distance,
                elevation_change=elevation_change,
                timestamp=end.timestamp,
            ))

            return GradeResult(
                instant_grade=instant_grade,
                smoothed_grade=self.get_smoothed_grade(),
                confidence=confidence,
                distance=distance,
                elevation_change=elevation_change,
                timestamp=end.timestamp,
            )

    def get_smoothed_grade(self) -> float:
        """Current smoothed grade (%), 0.0 when history is empty."""
        with self._lock:
            return self._history.smoothed_grade(self._configuration.smoothing_window_size)

    def get_grade_multiplier(self, grade_percent: float) -> GradeMultiplier:
        """Cost multipliers for a grade. Does not touch engine state."""
        return GradeMultiplier.for_grade(grade_percent)

    # =========================================================================
    # Elevation gain/loss
    # =========================================================================

    def update_elevation_metrics(self, elevation: float, confidence: float) -> bool:
        """
        Feed the gain/loss accumulator.

        Independent of grade history. Readings with confidence <= 0.5 and
        changes smaller than grade_noise_threshold are ignored.

        Args:
            elevation: Elevation in meters (any source, typically fused)
            confidence: Confidence of that elevation (0-1)

        Returns:
            True if the reading seeded or moved the accumulator
        """
        with self._lock:
            return self._accumulator.update(elevation, confidence)

    # =========================================================================
    # Aggregates
    # =========================================================================

    def average_grade(self, points: Sequence[Sample]) -> AverageGrade:
        """
        Average grade over an ordered sequence of samples.

        Every consecutive pair goes through calculate_grade(), so qualifying
        pairs ARE appended to this engine's history. Use a separate instance
        if the rolling session state must not change.

        Args:
            points: Ordered samples

        Returns:
            AverageGrade(grade, confidence); (0, 0) for fewer than two points,
            no pair with confidence > 0.5, or too little qualifying distance
        """
        if len(points) < 2:
            return AverageGrade(0.0, 0.0)

        total_distance = 0.0
        total_elevation_change = 0.0
        total_confidence = 0.0
        valid_segments = 0

        with self._lock:
            for start, end in zip(points, points[1:]):
                result = self.calculate_grade(start, end)

                if result.confidence > MIN_AVERAGE_CONFIDENCE:
                    total_distance += result.distance
                    total_elevation_change += result.elevation_change
                    total_confidence += result.confidence
                    valid_segments += 1

        if valid_segments == 0 or total_distance < self._configuration.min_distance_for_grade:
            return AverageGrade(0.0, 0.0)

        return AverageGrade(
            grade=round_to_precision(grade_percent(total_elevation_change, total_distance)),
            confidence=total_confidence / valid_segments,
        )

    def statistics(self) -> GradeStatistics:
        """Min, max, mean and population variance of instant grades in history."""
        with self._lock:
            return self._history.statistics()

    def reset(self) -> None:
        """Clear history and gain/loss state. Configuration is kept."""
        with self._lock:
            self._history.clear()
            self._accumulator.reset()
        logger.info("Grade calculator reset")
