"""
Grade engine module.

Usage:
    from trekgrade.features.grade import GradeCalculator, GradePreset, Sample

    calc = GradeCalculator(GradePreset.PRECISE)
    result = calc.calculate_grade(previous, current)

Available components:
- GradeCalculator: thread-safe grade engine (history, smoothing, gain/loss)
- GradeConfiguration, GradePreset, GRADE_PRESETS: immutable presets
- GradeMultiplier, grade_multiplier: grade -> energy cost multipliers
- GradeProfileService: replay a recorded track through the engine
"""
from .presets import GradeConfiguration, GradePreset, GRADE_PRESETS
from .models import (
    Sample,
    GradeResult,
    ElevationMetrics,
    AverageGrade,
    GradeStatistics,
)
from .confidence import calculate_confidence, accuracy_confidence, distance_confidence
from .history import GradeHistory
from .accumulator import ElevationAccumulator
from .multiplier import (
    GradeMultiplier,
    grade_multiplier,
    metabolic_multiplier,
    mechanical_multiplier,
)
from .calculator import GradeCalculator
from .service import GradeProfileService, GradeProfile
from .schemas import GradeResultSchema, GradeMultiplierSchema, GradeProfileSchema

__all__ = [
    # Configuration
    "GradeConfiguration",
    "GradePreset",
    "GRADE_PRESETS",
    # Models
    "Sample",
    "GradeResult",
    "ElevationMetrics",
    "AverageGrade",
    "GradeStatistics",
    # Components
    "calculate_confidence",
    "accuracy_confidence",
    "distance_confidence",
    "GradeHistory",
    "ElevationAccumulator",
    "GradeMultiplier",
    "grade_multiplier",
    "metabolic_multiplier",
    "mechanical_multiplier",
    # Engine
    "GradeCalculator",
    # Service
    "GradeProfileService",
    "GradeProfile",
    # Schemas
    "GradeResultSchema",
    "GradeMultiplierSchema",
    "GradeProfileSchema",
]
