"""
Formatting utilities for display.

Used by the CLI.
"""


def format_grade(grade_percent: float) -> str:
    """
    Format grade with sign.

    Args:
        grade_percent: Grade in percent

    Returns:
        Formatted string (e.g., '+7.5%', '-3.0%', '0.0%')
    """
    if grade_percent > 0:
        return f"+{grade_percent:.1f}%"
    return f"{grade_percent:.1f}%"


def format_distance_km(km: float) -> str:
    """
    Format distance.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., '12.5 km' or '850 m')
    """
    if km < 1:
        return f"{int(km * 1000)} m"
    return f"{km:.1f} km"


def format_elevation(meters: float) -> str:
    """
    Format elevation with sign.

    Args:
        meters: Elevation in meters

    Returns:
        Formatted string (e.g., '+850 m')
    """
    if meters >= 0:
        return f"+{int(meters)} m"
    return f"{int(meters)} m"


def format_confidence(confidence: float) -> str:
    """Format 0-1 confidence as a percentage ('85%')."""
    return f"{confidence * 100:.0f}%"
