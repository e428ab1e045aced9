"""
Bounded grade history and the smoothing window.

History keeps the most recent accepted results (FIFO eviction). The smoother
only reads the last smoothing_window_size entries of it.
"""

from collections import deque
from typing import List

from trekgrade.shared.constants import MAX_HISTORY_SIZE
from trekgrade.shared.formulas import round_to_precision, population_variance

from .models import GradeResult, GradeStatistics


class GradeHistory:
    """
    Fixed-capacity, time-ordered store of GradeResults (oldest first).

    Not thread-safe on its own; GradeCalculator serializes access.
    """

    def __init__(self, max_size: int = MAX_HISTORY_SIZE):
        self._results: deque[GradeResult] = deque(maxlen=max_size)

    def __len__(self) -> int:
        return len(self._results)

    @property
    def max_size(self) -> int:
        return self._results.maxlen

    def append(self, result: GradeResult) -> None:
        """Add the newest result, evicting the oldest when full."""
        self._results.append(result)

    def clear(self) -> None:
        self._results.clear()

    def recent(self, count: int) -> List[GradeResult]:
        """Last `count` results, most recent last."""
        if count <= 0:
            return []
        start = max(0, len(self._results) - count)
        return [self._results[i] for i in range(start, len(self._results))]

    def smoothed_grade(self, window_size: int) -> float:
        """
        Recency-, confidence- and distance-weighted mean of instant grades.

        Entry i (0-based, oldest first) of a window of W entries gets
        weight = confidence * distance * (i + 1) / W.

        Args:
            window_size: Max number of recent results to consider

        Returns:
            Smoothed grade rounded to 0.5%, or 0.0 when total weight is zero
        """
        window = self.recent(min(window_size, len(self._results)))
        if not window:
            return 0.0

        total_weight = 0.0
        weighted_sum = 0.0

        for index, result in enumerate(window):
            recency_weight = (index + 1) / len(window)
            weight = result.confidence * result.distance * recency_weight
            weighted_sum += result.instant_grade * weight
            total_weight += weight

        if total_weight <= 0:
            return 0.0

        return round_to_precision(weighted_sum / total_weight)

    def statistics(self) -> GradeStatistics:
        """Min, max, mean and population variance of instant grades."""
        grades = [r.instant_grade for r in self._results]
        if not grades:
            return GradeStatistics(0.0, 0.0, 0.0, 0.0)

        return GradeStatistics(
            min=min(grades),
            max=max(grades),
            average=sum(grades) / len(grades),
            variance=population_variance(grades),
        )
