"""
Pytest configuration for tube_bend_sim tests.

Puts the project root on sys.path so the tests run from a plain checkout
as well as from an installed package, and provides the shared fixtures.
"""
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tube_bend_sim.models import MaterialProfile, TubeSpec  # noqa: E402


@pytest.fixture
def tube() -> TubeSpec:
    """20 mm OD steel tube, 1.5 mm wall, 1 m long."""
    return TubeSpec(outer_diameter=20.0, wall_thickness=1.5, total_length=1000.0)


@pytest.fixture
def steel() -> MaterialProfile:
    """Mild steel: springback 0.975, minimum radius 20 x OD."""
    return MaterialProfile(
        springback_coefficient=0.975,
        min_radius_factor=20,
        name='Mild steel',
    )


@pytest.fixture
def rigid() -> MaterialProfile:
    """Material without springback, for exact geometry checks."""
    return MaterialProfile(springback_coefficient=1.0, min_radius_factor=1)
