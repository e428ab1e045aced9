"""
Tests for serialized access to GradeCalculator state.

Many threads hammer one engine; history bounds and totals must hold.
"""

from concurrent.futures import ThreadPoolExecutor

from trekgrade.features.grade import GradeCalculator, GradePreset, Sample, grade_multiplier
from track_helpers import offset_north


START = Sample(latitude=46.5, longitude=7.9, altitude=1000.0, vertical_accuracy=1.0)
END = Sample(latitude=offset_north(46.5, 100.0), longitude=7.9, altitude=1010.0, vertical_accuracy=1.0)


class TestConcurrentAccess:
    """Tests for concurrent callers."""

    def test_concurrent_grades_respect_bound(self):
        """8 threads x 50 accepted pairs => history capped at 100."""
        calc = GradeCalculator(GradePreset.BALANCED)

        def worker(_):
            return [calc.calculate_grade(START, END) for _ in range(50)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            batches = list(pool.map(worker, range(8)))

        assert calc.history_length == 100
        assert all(r.instant_grade == 10.0 for batch in batches for r in batch)
        assert all(r.smoothed_grade == 10.0 for batch in batches for r in batch)

    def test_readers_see_consistent_snapshots(self):
        """Statistics read during appends are never torn."""
        calc = GradeCalculator(GradePreset.BALANCED)

        def grader(_):
            for _ in range(200):
                calc.calculate_grade(START, END)

        def reader(_):
            return [calc.statistics() for _ in range(200)]

        with ThreadPoolExecutor(max_workers=6) as pool:
            writers = [pool.submit(grader, i) for i in range(3)]
            readers = [pool.submit(reader, i) for i in range(3)]
            for future in writers:
                future.result()
            snapshots = [s for future in readers for s in future.result()]

        for stats in snapshots:
            assert stats in ((0.0, 0.0, 0.0, 0.0), (10.0, 10.0, 10.0, 0.0))

    def test_elevation_updates_from_many_threads(self):
        """Accumulator totals stay within what the readings allow."""
        calc = GradeCalculator(GradePreset.BALANCED)

        def worker(offset):
            for step in range(50):
                calc.update_elevation_metrics(1000.0 + offset + step * 0.1, 0.9)

        with ThreadPoolExecutor(max_workers=4) as pool:
            list(pool.map(worker, [0.0, 0.5, 1.0, 1.5]))

        gain, loss = calc.elevation_metrics
        assert gain >= 0.0
        assert loss >= 0.0
        # reference never leaves the sampled band [1000, 1006.4]
        assert gain - loss <= 6.4 + 1e-9

    def test_reset_during_updates(self):
        """Reset racing with appends leaves a consistent engine."""
        calc = GradeCalculator(GradePreset.BALANCED)

        def grader(_):
            for _ in range(200):
                calc.calculate_grade(START, END)

        def resetter(_):
            for _ in range(20):
                calc.reset()

        with ThreadPoolExecutor(max_workers=5) as pool:
            futures = [pool.submit(grader, i) for i in range(4)]
            futures.append(pool.submit(resetter, 0))
            for future in futures:
                future.result()

        assert 0 <= calc.history_length <= 100
        stats = calc.statistics()
        if calc.history_length:
            assert stats == (10.0, 10.0, 10.0, 0.0)
        else:
            assert stats == (0.0, 0.0, 0.0, 0.0)

    def test_multiplier_needs_no_engine(self):
        """The multiplier is callable from any thread without state."""
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(grade_multiplier, [5.0] * 100))

        assert len(set(results)) == 1
