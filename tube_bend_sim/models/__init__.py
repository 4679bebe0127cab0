"""Data models for tube bending simulation."""

from .types import (
    Point2D,
    Vector2D,
    PathPoints,
    TurnDirection,
    ActionType,
)
from .tube import (
    TubeSpec,
    BendSpec,
    MaterialProfile,
    TubeSpecDict,
    BendSpecDict,
    MaterialProfileDict,
    validate_material_values,
)
from .project import (
    Project,
    ProjectDict,
    PROJECT_FORMAT_VERSION,
)
from .results import (
    ValidationResult,
    BendMetrics,
    SimulationMetrics,
)

__all__ = [
    # Types
    'Point2D',
    'Vector2D',
    'PathPoints',
    'TurnDirection',
    'ActionType',
    # Specifications
    'TubeSpec',
    'BendSpec',
    'MaterialProfile',
    'TubeSpecDict',
    'BendSpecDict',
    'MaterialProfileDict',
    'validate_material_values',
    # Projects
    'Project',
    'ProjectDict',
    'PROJECT_FORMAT_VERSION',
    # Results
    'ValidationResult',
    'BendMetrics',
    'SimulationMetrics',
]
