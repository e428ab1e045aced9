"""
Shared utilities (NOT business logic).

Usage:
    from trekgrade.shared import haversine_m, round_to_precision
    from trekgrade.shared.formatters import format_grade
"""
from .geo import (
    haversine,
    haversine_m,
    EARTH_RADIUS_KM,
    EARTH_RADIUS_M,
)
from .formulas import (
    grade_percent,
    clamp,
    round_to_precision,
    population_variance,
)
from .formatters import (
    format_grade,
    format_distance_km,
    format_elevation,
    format_confidence,
)
from .constants import (
    MAX_HISTORY_SIZE,
    GRADE_PRECISION,
    CONFIDENCE_FULL_DISTANCE_M,
    MULTIPLIER_GRADE_MIN,
    MULTIPLIER_GRADE_MAX,
)

__all__ = [
    # geo
    "haversine",
    "haversine_m",
    "EARTH_RADIUS_KM",
    "EARTH_RADIUS_M",
    # formulas
    "grade_percent",
    "clamp",
    "round_to_precision",
    "population_variance",
    # formatters
    "format_grade",
    "format_distance_km",
    "format_elevation",
    "format_confidence",
    # constants
    "MAX_HISTORY_SIZE",
    "GRADE_PRECISION",
    "CONFIDENCE_FULL_DISTANCE_M",
    "MULTIPLIER_GRADE_MIN",
    "MULTIPLIER_GRADE_MAX",
]
