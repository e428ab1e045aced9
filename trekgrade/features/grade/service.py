"""
Grade profile service.

Replays an ordered track of samples through a fresh GradeCalculator, the way
a live session would feed it, and summarizes the outcome.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .calculator import GradeCalculator
from .confidence import accuracy_confidence
from .models import AverageGrade, ElevationMetrics, GradeResult, GradeStatistics, Sample
from .multiplier import metabolic_multiplier
from .presets import GradeConfiguration, GradePreset

logger = logging.getLogger(__name__)


@dataclass
class GradeProfile:
    """Outcome of replaying one track."""
    results: List[GradeResult] = field(default_factory=list)
    elevation: ElevationMetrics = ElevationMetrics(0.0, 0.0)
    statistics: GradeStatistics = GradeStatistics(0.0, 0.0, 0.0, 0.0)
    average: AverageGrade = AverageGrade(0.0, 0.0)
    total_distance_m: float = 0.0
    energy_cost_index: float = 1.0  # distance-weighted metabolic multiplier

    @property
    def final_smoothed_grade(self) -> float:
        """Smoothed grade after the last sample (0.0 for an empty track)."""
        if not self.results:
            return 0.0
        return self.results[-1].smoothed_grade


class GradeProfileService:
    """
    Build a GradeProfile from a recorded track.

    Each call uses its own engine, so profiles never share history.
    """

    def __init__(
        self,
        configuration: Union[GradeConfiguration, GradePreset, str] = GradePreset.BALANCED
    ):
        if not isinstance(configuration, GradeConfiguration):
            configuration = GradeConfiguration.from_preset(configuration)
        self.configuration = configuration

    def analyze(self, samples: Sequence[Sample]) -> GradeProfile:
        """
        Replay samples pairwise and feed every elevation to the accumulator.

        The accumulator gets each sample's elevation with the confidence of
        its vertical accuracy tier. Unknown accuracy (< 0) scores exactly 0.5,
        which the accumulator rejects, so such tracks report zero gain/loss
        and a warning is logged. The average grade is computed on a separate
        engine so this replay's history is not fed twice.

        Args:
            samples: Ordered samples of one track

        Returns:
            GradeProfile (empty for fewer than two samples)
        """
        if len(samples) < 2:
            logger.info(f"Track too short for a grade profile ({len(samples)} samples)")
            return GradeProfile()

        calculator = GradeCalculator(self.configuration)
        results: List[GradeResult] = []

        accepted_elevations = 0
        previous: Optional[Sample] = None
        for sample in samples:
            if calculator.update_elevation_metrics(
                sample.elevation,
                accuracy_confidence(sample.vertical_accuracy)
            ):
                accepted_elevations += 1
            if previous is not None:
                results.append(calculator.calculate_grade(previous, sample))
            previous = sample

        if accepted_elevations == 0:
            logger.warning(
                f"No elevation reading accepted for gain/loss "
                f"({len(samples)} samples, vertical accuracy unknown or too poor)"
            )

        average = GradeCalculator(self.configuration).average_grade(samples)

        total_distance = sum(r.distance for r in results)
        if total_distance > 0:
            cost_index = sum(
                metabolic_multiplier(r.smoothed_grade) * r.distance for r in results
            ) / total_distance
        else:
            cost_index = 1.0

        profile = GradeProfile(
            results=results,
            elevation=calculator.elevation_metrics,
            statistics=calculator.statistics(),
            average=average,
            total_distance_m=total_distance,
            energy_cost_index=cost_index,
        )

        logger.info(
            f"Grade profile: {len(samples)} samples, {total_distance:.0f}m, "
            f"+{profile.elevation.gain:.0f}m/-{profile.elevation.loss:.0f}m, "
            f"avg grade {average.grade:+.1f}%"
        )
        return profile
