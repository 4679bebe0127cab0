"""Material, tube and project storage."""

from .materials import (
    BUILTIN_MATERIALS,
    MaterialLibrary,
    MaterialLoadError,
    MaterialSaveError,
)
from .tube_standards import (
    STANDARD_TUBES,
    TubeCatalog,
    TubeStandard,
)
from .projects import (
    ProjectStore,
    ProjectLoadError,
    ProjectSaveError,
)

__all__ = [
    'BUILTIN_MATERIALS',
    'MaterialLibrary',
    'MaterialLoadError',
    'MaterialSaveError',
    'STANDARD_TUBES',
    'TubeCatalog',
    'TubeStandard',
    'ProjectStore',
    'ProjectLoadError',
    'ProjectSaveError',
]
