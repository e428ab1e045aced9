"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

from trekgrade.features.grade.presets import GradePreset


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Grade engine ===
    grade_preset: GradePreset = Field(
        default=GradePreset.BALANCED,
        description="Configuration preset used when none is given explicitly"
    )

    # === GPX replay ===
    gpx_vertical_accuracy_m: float = Field(
        default=5.0,
        description="Assumed vertical accuracy for GPX points (negative = unknown)"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Debug' etc."""
        return v.upper()

    @field_validator('grade_preset', mode='before')
    @classmethod
    def parse_grade_preset(cls, v):
        """Accept preset names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
