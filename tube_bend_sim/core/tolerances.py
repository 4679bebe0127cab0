"""Tolerance and limit constants for bend calculations.

Centralizes the thresholds used by the sequence manager, validator and
path generator for consistency and easy tuning. All lengths in mm.
"""

# Minimum clearance between two bend positions along the tube
MIN_BEND_SPACING_MM: float = 10.0

# Number of sub-segments used to tessellate each bend arc
ARC_STEPS: int = 40

# Radius below min_radius * NEAR_LIMIT_RATIO triggers a collapse/wrinkling warning
NEAR_LIMIT_RATIO: float = 1.2

# Bend angles with a smaller magnitude are rejected (degrees)
MIN_ANGLE_DEGREES: float = 0.1

# Bend angles with a larger magnitude are flagged for review (degrees)
MAX_ANGLE_DEGREES: float = 180.0

# Straight segments shorter than this are not emitted
ZERO_LENGTH: float = 1e-9

# Point coincidence tolerance for path comparisons
POINT_MATCH_MM: float = 1e-6
