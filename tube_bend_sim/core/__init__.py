"""Core bend geometry, validation and metrics."""

from .geometry import (
    heading_vector,
    advance,
    turn_sign,
    arc_center,
    generate_arc_points,
    distance_between_points,
    points_are_close,
    path_length,
    path_bounds,
)
from .sequence import (
    BendSequence,
    TooCloseError,
)
from .metrics import (
    minimum_radius,
    applied_radius,
    springback_compensated_angle,
    arc_length,
    bend_deduction_value,
    bend_length_correction,
    developed_length,
    compute_metrics,
)
from .validation import (
    validate_tube,
    validate_bend,
)
from .path_generator import (
    compute_path,
    final_heading,
)
from .history import (
    SessionState,
    HistoryEntry,
    HistoryManager,
)
from .session import BendSession
from .formatting import (
    format_length,
    format_angle,
)
from .tolerances import (
    MIN_BEND_SPACING_MM,
    ARC_STEPS,
    NEAR_LIMIT_RATIO,
    MIN_ANGLE_DEGREES,
    MAX_ANGLE_DEGREES,
)

__all__ = [
    # Geometry
    'heading_vector',
    'advance',
    'turn_sign',
    'arc_center',
    'generate_arc_points',
    'distance_between_points',
    'points_are_close',
    'path_length',
    'path_bounds',
    # Sequence
    'BendSequence',
    'TooCloseError',
    # Metrics
    'minimum_radius',
    'applied_radius',
    'springback_compensated_angle',
    'arc_length',
    'bend_deduction_value',
    'bend_length_correction',
    'developed_length',
    'compute_metrics',
    # Validation
    'validate_tube',
    'validate_bend',
    # Path generation
    'compute_path',
    'final_heading',
    # History
    'SessionState',
    'HistoryEntry',
    'HistoryManager',
    # Session
    'BendSession',
    # Formatting
    'format_length',
    'format_angle',
    # Tolerances
    'MIN_BEND_SPACING_MM',
    'ARC_STEPS',
    'NEAR_LIMIT_RATIO',
    'MIN_ANGLE_DEGREES',
    'MAX_ANGLE_DEGREES',
]
