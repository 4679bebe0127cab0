"""Manufacturing formulas for bent tubes.

All functions are pure. Inputs are assumed to have passed validation: a
zero springback coefficient, for instance, is not guarded against.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from ..models import (
    BendMetrics,
    BendSpec,
    MaterialProfile,
    SimulationMetrics,
    TubeSpec,
)


def minimum_radius(outer_diameter: float, material: MaterialProfile) -> float:
    """Smallest safe bend radius for a tube of this diameter and material."""
    return material.min_radius_factor * outer_diameter


def applied_radius(radius: float, material: MaterialProfile) -> float:
    """Radius to form so the tube relaxes to ``radius`` after springback."""
    return radius / material.springback_coefficient


def springback_compensated_angle(desired_angle: float, material: MaterialProfile) -> float:
    """
    Angle to impart so elastic recovery leaves ``desired_angle``.

    Args:
        desired_angle: Final angle wanted, in degrees (sign is kept)
        material: Material supplying the springback coefficient

    Returns:
        Over-bent angle in degrees
    """
    return desired_angle / material.springback_coefficient


def arc_length(radius: float, angle: float) -> float:
    """Length of a bend's arc along ``radius`` for an angle in degrees."""
    return radius * math.radians(abs(angle))


def bend_deduction_value(radius: float, angle: float) -> float:
    """
    Bend deduction ("value A") for laying out mark-to-mark lengths.

    Uses the general tangent law ``radius * tan(|angle| / 2)`` for every
    angle, including 90° where it equals the radius.

    Args:
        radius: Bend radius in mm
        angle: Bend angle in degrees (sign ignored)

    Returns:
        Length to subtract, in mm
    """
    return radius * math.tan(math.radians(abs(angle)) / 2)


def bend_length_correction(bend: BendSpec) -> float:
    """Arc length minus the chord it replaces, for one bend (signed angle)."""
    angle_rad = math.radians(bend.angle_degrees)
    return angle_rad * bend.bend_radius - 2 * bend.bend_radius * math.sin(angle_rad / 2)


def developed_length(tube: TubeSpec, bends: Iterable[BendSpec]) -> float:
    """
    Straight stock length needed to produce the bent tube.

    Args:
        tube: Tube specification (total_length is the nominal straight length)
        bends: Bends along the tube

    Returns:
        total_length plus the arc-versus-chord correction of every bend
    """
    return tube.total_length + sum(bend_length_correction(b) for b in bends)


def compute_metrics(
    tube: TubeSpec,
    bends: Iterable[BendSpec],
    material: MaterialProfile,
) -> SimulationMetrics:
    """
    Calculate developed length and per-bend manufacturing values.

    Args:
        tube: Tube specification
        bends: Bends in position order (a BendSequence or a snapshot of one)
        material: Material profile

    Returns:
        SimulationMetrics with one BendMetrics entry per bend
    """
    bend_list = list(bends)

    per_bend: list[BendMetrics] = []
    for i, bend in enumerate(bend_list):
        per_bend.append(BendMetrics(
            index=i + 1,
            position_mm=bend.position_mm,
            angle_degrees=bend.angle_degrees,
            applied_angle=springback_compensated_angle(bend.angle_degrees, material),
            applied_radius=applied_radius(bend.bend_radius, material),
            deduction_value=bend_deduction_value(bend.bend_radius, bend.angle_degrees),
            arc_length=arc_length(bend.bend_radius, bend.angle_degrees),
        ))

    return SimulationMetrics(
        developed_length=developed_length(tube, bend_list),
        minimum_radius=minimum_radius(tube.outer_diameter, material),
        per_bend=per_bend,
    )
