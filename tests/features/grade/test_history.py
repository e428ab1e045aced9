"""
Tests for GradeHistory.

Tests the bounded FIFO store and the weighted smoothing window directly,
without going through sample geometry.
"""

import pytest

from trekgrade.features.grade import GradeHistory, GradeResult


def result(grade: float, confidence: float = 1.0, distance: float = 50.0) -> GradeResult:
    """Accepted result with the given instant grade."""
    return GradeResult(
        instant_grade=grade,
        smoothed_grade=0.0,
        confidence=confidence,
        distance=distance,
        elevation_change=grade * distance / 100,
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def history():
    return GradeHistory()


# =============================================================================
# Test Storage
# =============================================================================

class TestStorage:
    """Tests for append, eviction and recent()."""

    def test_default_capacity(self, history):
        assert history.max_size == 100

    def test_fifo_eviction(self):
        """Oldest entries go first once capacity is reached."""
        history = GradeHistory(max_size=3)
        for grade in (1.0, 2.0, 3.0, 4.0, 5.0):
            history.append(result(grade))

        assert len(history) == 3
        assert [r.instant_grade for r in history.recent(3)] == [3.0, 4.0, 5.0]

    def test_recent_most_recent_last(self, history):
        for grade in (1.0, 2.0, 3.0, 4.0):
            history.append(result(grade))

        assert [r.instant_grade for r in history.recent(2)] == [3.0, 4.0]

    def test_recent_more_than_available(self, history):
        history.append(result(1.0))
        assert len(history.recent(5)) == 1

    def test_recent_zero(self, history):
        history.append(result(1.0))
        assert history.recent(0) == []

    def test_clear(self, history):
        history.append(result(1.0))
        history.clear()
        assert len(history) == 0


# =============================================================================
# Test Smoothed Grade
# =============================================================================

class TestSmoothedGrade:
    """Tests for the recency/confidence/distance weighted mean."""

    def test_empty(self, history):
        assert history.smoothed_grade(5) == 0.0

    def test_single_entry(self, history):
        history.append(result(7.5))
        assert history.smoothed_grade(5) == 7.5

    def test_recency_ramp(self, history):
        """Grades 0, 10 with weights 1/2, 2/2 => 10 * 1 / 1.5 = 6.67 => 6.5."""
        history.append(result(0.0))
        history.append(result(10.0))
        assert history.smoothed_grade(2) == 6.5

    def test_only_window_is_read(self, history):
        """Window 3 over [20, 0, 0, 10] ignores the 20."""
        for grade in (20.0, 0.0, 0.0, 10.0):
            history.append(result(grade))

        # weights 1/3, 2/3, 3/3 => 10 / 2 = 5.0
        assert history.smoothed_grade(3) == 5.0

    def test_window_larger_than_history(self, history):
        """Window is capped by history length."""
        history.append(result(4.0))
        history.append(result(4.0))
        assert history.smoothed_grade(10) == 4.0

    def test_confidence_weighting(self, history):
        """A low-confidence recent entry barely moves the estimate."""
        history.append(result(10.0, confidence=1.0))
        history.append(result(-10.0, confidence=0.01))

        # weights 0.5 * 50 and 1.0 * 0.5 => (250 - 5) / 25.5 = 9.6 => 9.5
        assert history.smoothed_grade(2) == 9.5

    def test_distance_weighting(self, history):
        """Long segments dominate short ones."""
        history.append(result(8.0, distance=200.0))
        history.append(result(0.0, distance=10.0))

        # weights 0.5 * 200 = 100 and 1.0 * 10 = 10 => 800 / 110 = 7.27 => 7.5
        assert history.smoothed_grade(2) == 7.5

    def test_zero_total_weight(self, history):
        """All zero confidence => 0."""
        history.append(result(10.0, confidence=0.0))
        history.append(result(12.0, confidence=0.0))
        assert history.smoothed_grade(2) == 0.0

    def test_result_is_multiple_of_half(self, history):
        for grade in (1.5, 3.0, 2.5, 4.0, 0.5):
            history.append(result(grade, confidence=0.73, distance=37.0))
        assert (history.smoothed_grade(5) * 2).is_integer()


# =============================================================================
# Test Statistics
# =============================================================================

class TestStatistics:
    """Tests for statistics()."""

    def test_empty(self, history):
        assert history.statistics() == (0.0, 0.0, 0.0, 0.0)

    def test_values(self, history):
        for grade in (-2.0, 0.5, 4.0):
            history.append(result(grade))

        stats = history.statistics()
        assert stats.min == -2.0
        assert stats.max == 4.0
        assert stats.average == pytest.approx(2.5 / 3)
        mean = 2.5 / 3
        expected_var = ((-2.0 - mean) ** 2 + (0.5 - mean) ** 2 + (4.0 - mean) ** 2) / 3
        assert stats.variance == pytest.approx(expected_var)

    def test_covers_whole_history_not_window(self, history):
        """Statistics use all entries, not only the smoothing window."""
        for grade in (30.0, 1.0, 1.0, 1.0):
            history.append(result(grade))
        assert history.statistics().max == 30.0
