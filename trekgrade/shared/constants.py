"""
Fixed model constants for the grade engine.

These are not part of a configuration preset: every preset shares them.
"""

# Number of accepted grade results kept, independent of the smoothing window
MAX_HISTORY_SIZE = 100

# Grades are reported with 0.5% precision
GRADE_PRECISION = 0.5

# Distance at which distance confidence saturates at 1.0
CONFIDENCE_FULL_DISTANCE_M = 50.0

# Vertical accuracy tiers: (upper bound in meters, confidence)
# Checked in order; anything worse than the last bound gets POOR_ACCURACY_CONFIDENCE
ACCURACY_CONFIDENCE_TIERS = (
    (1.0, 1.0),
    (5.0, 0.8),
    (10.0, 0.6),
)
UNKNOWN_ACCURACY_CONFIDENCE = 0.5
POOR_ACCURACY_CONFIDENCE = 0.3

# Elevation updates must be strictly more confident than this to count
MIN_ELEVATION_CONFIDENCE = 0.5

# Aggregate average only uses pairs strictly more confident than this
MIN_AVERAGE_CONFIDENCE = 0.5

# Validity range of the grade -> cost multiplier model (%)
MULTIPLIER_GRADE_MIN = -20.0
MULTIPLIER_GRADE_MAX = 20.0
