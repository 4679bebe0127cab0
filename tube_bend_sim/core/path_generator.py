"""Planar centerline generation for a bent tube.

Walks the bends in position order while carrying a running position and
heading. Straight runs contribute their end point; each bend contributes a
circular arc tessellated into ARC_STEPS sub-segments around a center offset
perpendicular to the heading. Clockwise (negative) bends use the same
formula with the rotation sign flipped.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from ..models import BendSpec, MaterialProfile, PathPoints, Point2D, TubeSpec
from .geometry import advance, generate_arc_points
from .metrics import applied_radius
from .tolerances import ARC_STEPS, ZERO_LENGTH


def compute_path(
    tube: TubeSpec,
    bends: Iterable[BendSpec],
    material: MaterialProfile,
    steps: int = ARC_STEPS,
) -> PathPoints:
    """
    Tessellate the centerline of the bent tube.

    Straight distances are measured between bend positions. Each arc spans
    steps + 1 points; its first point is the current position, which is
    already on the path, so every bend strictly inside the tube adds one
    straight end point and ``steps`` arc points. Zero-length straights and
    a non-positive tail are omitted.

    Args:
        tube: Tube specification
        bends: Bends sorted ascending by position (a BendSequence or snapshot)
        material: Material supplying the springback coefficient
        steps: Sub-segments per arc

    Returns:
        Points starting at (0, 0); at least two points. An empty sequence
        yields [(0, 0), (total_length, 0)].
    """
    bend_list = list(bends)
    if not bend_list:
        return [(0.0, 0.0), (tube.total_length, 0.0)]

    position: Point2D = (0.0, 0.0)
    heading = 0.0
    previous_position_mm = 0.0
    points: PathPoints = [position]

    for bend in bend_list:
        straight = bend.position_mm - previous_position_mm
        if straight > ZERO_LENGTH:
            position = advance(position, heading, straight)
            points.append(position)

        angle_rad = bend.angle_degrees * math.pi / 180
        radius = applied_radius(bend.bend_radius, material)
        arc = generate_arc_points(position, heading, radius, angle_rad, steps)
        # arc[0] is the current position, already the last emitted point
        points.extend(arc[1:])

        position = arc[-1]
        heading += angle_rad
        previous_position_mm = bend.position_mm

    tail = tube.total_length - previous_position_mm
    if tail > 0:
        points.append(advance(position, heading, tail))

    return points


def final_heading(bends: Iterable[BendSpec]) -> float:
    """Heading in radians after all bends, 0 being the initial tube axis."""
    return sum(b.angle_degrees * math.pi / 180 for b in bends)
