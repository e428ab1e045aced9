"""
Grade output schemas.

Pydantic models for JSON output.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .service import GradeProfile


class GradeResultSchema(BaseModel):
    """Single pairwise grade result."""
    model_config = ConfigDict(from_attributes=True)

    instant_grade: float = Field(..., description="Grade in percent, 0.5 precision")
    smoothed_grade: float = Field(..., description="Smoothed grade in percent")
    confidence: float = Field(..., ge=0.0, le=1.0)
    distance: float = Field(..., description="Meters between the two samples")
    elevation_change: float = Field(..., description="Signed meters")
    timestamp: Optional[datetime] = None


class GradeMultiplierSchema(BaseModel):
    """Cost multipliers for one grade."""
    model_config = ConfigDict(from_attributes=True)

    grade: float
    metabolic_multiplier: float
    mechanical_multiplier: float


class GradeProfileSchema(BaseModel):
    """Replayed track summary."""
    distance_m: float
    elevation_gain_m: float
    elevation_loss_m: float
    average_grade: float
    average_confidence: float
    min_grade: float
    max_grade: float
    mean_grade: float
    grade_variance: float
    final_smoothed_grade: float
    energy_cost_index: float
    results: List[GradeResultSchema] = []

    @classmethod
    def from_profile(cls, profile: GradeProfile, include_results: bool = True) -> "GradeProfileSchema":
        """Flatten a GradeProfile for output."""
        return cls(
            distance_m=round(profile.total_distance_m, 1),
            elevation_gain_m=round(profile.elevation.gain, 1),
            elevation_loss_m=round(profile.elevation.loss, 1),
            average_grade=profile.average.grade,
            average_confidence=round(profile.average.confidence, 3),
            min_grade=profile.statistics.min,
            max_grade=profile.statistics.max,
            mean_grade=round(profile.statistics.average, 2),
            grade_variance=round(profile.statistics.variance, 2),
            final_smoothed_grade=profile.final_smoothed_grade,
            energy_cost_index=round(profile.energy_cost_index, 3),
            results=(
                [GradeResultSchema.model_validate(r) for r in profile.results]
                if include_results else []
            ),
        )
