"""
Grade -> energy cost multipliers.

Piecewise-linear metabolic curve after Minetti et al. (2002) with
Pandolf-style adjustments, plus a mechanical factor separating eccentric
(downhill) from concentric (uphill) muscular work.

Pure and stateless: safe to call from any thread without locking.

References:
- Minetti et al. (2002) - Energy cost of walking and running at extreme
  uphill and downhill slopes
  https://pubmed.ncbi.nlm.nih.gov/12183501/
"""

from dataclasses import dataclass

from trekgrade.shared.constants import MULTIPLIER_GRADE_MIN, MULTIPLIER_GRADE_MAX
from trekgrade.shared.formulas import clamp

# Mechanical work factors
ECCENTRIC_MULTIPLIER = 0.7   # grade < 0
CONCENTRIC_MULTIPLIER = 1.0  # grade >= 0


def metabolic_multiplier(grade_percent: float) -> float:
    """
    Metabolic cost relative to flat ground.

    Bands (g already clamped to [-20, 20]):
        g < -10:        0.85 + (g + 20) * 0.007
        -10 <= g < 0:   0.92 + g * 0.008
        0 <= g < 10:    1.0 + g * 0.045
        g >= 10:        1.45 + (g - 10) * 0.065

    Continuous at +10; jumps at -10 (0.92 -> 0.84) and 0 (0.92 -> 1.0).
    """
    g = clamp(grade_percent, MULTIPLIER_GRADE_MIN, MULTIPLIER_GRADE_MAX)

    if g < -10:
        return 0.85 + (g + 20) * 0.007
    if g < 0:
        return 0.92 + g * 0.008
    if g < 10:
        return 1.0 + g * 0.045
    return 1.45 + (g - 10) * 0.065


def mechanical_multiplier(grade_percent: float) -> float:
    """0.7 downhill (eccentric), 1.0 flat or uphill (concentric)."""
    return ECCENTRIC_MULTIPLIER if grade_percent < 0 else CONCENTRIC_MULTIPLIER


@dataclass(frozen=True)
class GradeMultiplier:
    """Cost multipliers for one grade."""
    grade: float                  # clamped to the model range
    metabolic_multiplier: float
    mechanical_multiplier: float

    @classmethod
    def for_grade(cls, grade_percent: float) -> "GradeMultiplier":
        """
        Calculate multipliers for a grade.

        Out-of-range grades are clamped to [-20, 20] silently.

        Args:
            grade_percent: Grade in percent (positive = uphill)

        Returns:
            GradeMultiplier with the clamped grade
        """
        g = clamp(grade_percent, MULTIPLIER_GRADE_MIN, MULTIPLIER_GRADE_MAX)
        return cls(
            grade=g,
            metabolic_multiplier=metabolic_multiplier(g),
            mechanical_multiplier=mechanical_multiplier(g),
        )


def grade_multiplier(grade_percent: float) -> GradeMultiplier:
    """Shortcut for GradeMultiplier.for_grade()."""
    return GradeMultiplier.for_grade(grade_percent)
