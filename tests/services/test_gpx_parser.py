"""
Tests for GPXParserService.
"""

import pytest

from trekgrade.services import GPXParserService


def build_gpx(body: str) -> bytes:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<gpx version="1.1" creator="trekgrade-tests" '
        'xmlns="http://www.topografix.com/GPX/1/1">\n'
        f'{body}\n'
        '</gpx>\n'
    ).encode('utf-8')


TRACK_GPX = build_gpx("""
<trk><name>Ridge</name><trkseg>
  <trkpt lat="46.5000" lon="7.9"><ele>1000.0</ele><time>2025-08-02T09:00:00Z</time></trkpt>
  <trkpt lat="46.5004" lon="7.9"><ele>1002.0</ele><time>2025-08-02T09:00:30Z</time></trkpt>
  <trkpt lat="46.5008" lon="7.9"><ele>1004.0</ele><time>2025-08-02T09:01:00Z</time></trkpt>
</trkseg></trk>
""")

ROUTE_GPX = build_gpx("""
<rte><name>Planned</name>
  <rtept lat="46.5000" lon="7.9"><ele>1000.0</ele></rtept>
  <rtept lat="46.5004" lon="7.9"><ele>995.0</ele></rtept>
</rte>
""")

MISSING_ELEVATION_GPX = build_gpx("""
<trk><trkseg>
  <trkpt lat="46.5000" lon="7.9"><ele>1000.0</ele></trkpt>
  <trkpt lat="46.5004" lon="7.9"></trkpt>
  <trkpt lat="46.5008" lon="7.9"><ele>1004.0</ele></trkpt>
</trkseg></trk>
""")


class TestExtractSamples:
    """Tests for GPXParserService.extract_samples."""

    def test_track_points(self):
        samples = GPXParserService.extract_samples(TRACK_GPX)

        assert len(samples) == 3
        assert samples[0].latitude == pytest.approx(46.5)
        assert samples[2].altitude == pytest.approx(1004.0)

    def test_timestamps(self):
        samples = GPXParserService.extract_samples(TRACK_GPX)

        assert samples[0].timestamp is not None
        assert (samples[1].timestamp - samples[0].timestamp).total_seconds() == 30

    def test_vertical_accuracy_assigned(self):
        samples = GPXParserService.extract_samples(TRACK_GPX, vertical_accuracy=3.0)
        assert all(s.vertical_accuracy == 3.0 for s in samples)

    def test_default_accuracy_unknown(self):
        samples = GPXParserService.extract_samples(TRACK_GPX)
        assert all(s.vertical_accuracy < 0 for s in samples)

    def test_route_fallback(self):
        samples = GPXParserService.extract_samples(ROUTE_GPX)

        assert len(samples) == 2
        assert samples[1].altitude == pytest.approx(995.0)
        assert samples[1].timestamp is None

    def test_points_without_elevation_skipped(self):
        samples = GPXParserService.extract_samples(MISSING_ELEVATION_GPX)

        assert [s.altitude for s in samples] == [1000.0, 1004.0]

    def test_invalid_gpx(self):
        with pytest.raises(ValueError, match="Invalid GPX file"):
            GPXParserService.extract_samples(b"this is not a gpx file")

    def test_empty_gpx(self):
        assert GPXParserService.extract_samples(build_gpx("")) == []
