"""
GPX Parser Service

Parses GPX files into samples for the grade engine.
"""

import logging
from typing import List

import gpxpy
import gpxpy.gpx

from trekgrade.features.grade.models import Sample

logger = logging.getLogger(__name__)


class GPXParserService:
    """Service for parsing GPX files."""

    @staticmethod
    def parse(content: bytes) -> gpxpy.gpx.GPX:
        """
        Parse GPX content.

        Args:
            content: GPX file content as bytes

        Returns:
            Parsed gpxpy document

        Raises:
            ValueError: If GPX is invalid
        """
        try:
            return gpxpy.parse(content.decode('utf-8'))
        except Exception as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise ValueError(f"Invalid GPX file: {e}")

    @staticmethod
    def extract_samples(
        content: bytes,
        vertical_accuracy: float = -1.0
    ) -> List[Sample]:
        """
        Extract samples from GPX content.

        Track points are used when present, route points otherwise.
        Points without elevation cannot contribute to a grade and are skipped.

        Args:
            content: GPX file content as bytes
            vertical_accuracy: Vertical accuracy (m) to assign to every
                              sample; GPX carries none (negative = unknown)

        Returns:
            Ordered list of Samples

        Raises:
            ValueError: If GPX is invalid
        """
        gpx = GPXParserService.parse(content)

        points: List[gpxpy.gpx.GPXTrackPoint] = []
        for track in gpx.tracks:
            for segment in track.segments:
                points.extend(segment.points)

        if not points:
            for route in gpx.routes:
                points.extend(route.points)

        samples: List[Sample] = []
        skipped = 0
        for point in points:
            if point.elevation is None:
                skipped += 1
                continue
            samples.append(Sample(
                latitude=point.latitude,
                longitude=point.longitude,
                altitude=point.elevation,
                vertical_accuracy=vertical_accuracy,
                timestamp=point.time,
            ))

        if skipped:
            logger.warning(f"Skipped {skipped} GPX points without elevation")

        return samples
