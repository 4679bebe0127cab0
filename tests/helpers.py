"""
Shared test helpers for tube_bend_sim tests.
"""
from __future__ import annotations

from tube_bend_sim.models import BendSpec, Point2D


def make_bend(position: float, angle: float = 90.0, radius: float = 500.0) -> BendSpec:
    """Create a BendSpec that validates without warnings on the 20 mm steel tube."""
    return BendSpec(angle_degrees=angle, bend_radius=radius, position_mm=position)


def assert_points_close(p1: Point2D, p2: Point2D, tol: float = 1e-6) -> None:
    """Assert two points coincide within ``tol`` on both axes."""
    assert abs(p1[0] - p2[0]) <= tol, f"x differs: {p1} vs {p2}"
    assert abs(p1[1] - p2[1]) <= tol, f"y differs: {p1} vs {p2}"
