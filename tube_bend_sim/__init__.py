"""tube_bend_sim - planar tube bending geometry and manufacturing metrics.

Computes the centerline of a tube with sequential bends (accounting for
springback), validates bends against tube and material limits, and derives
developed length, bend deduction and minimum bend radius.
"""

from . import core
from . import models
from . import storage
from .core import (
    BendSequence,
    BendSession,
    TooCloseError,
    compute_metrics,
    compute_path,
    validate_bend,
)
from .models import BendSpec, MaterialProfile, TubeSpec, ValidationResult

__version__ = '1.0.0'

__all__ = [
    'core',
    'models',
    'storage',
    'BendSequence',
    'BendSession',
    'TooCloseError',
    'compute_metrics',
    'compute_path',
    'validate_bend',
    'BendSpec',
    'MaterialProfile',
    'TubeSpec',
    'ValidationResult',
]
