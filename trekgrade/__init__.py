"""
trekgrade - terrain grade engine for trek tracking.

Usage:
    from trekgrade.features.grade import GradeCalculator, GradePreset, Sample
"""

__version__ = "0.1.0"
