"""2D vector math for planar tube centerlines."""

from __future__ import annotations

import math

from ..models.types import Point2D, Vector2D
from .tolerances import POINT_MATCH_MM


def heading_vector(heading: float) -> Vector2D:
    """
    Unit vector pointing along a heading.

    Args:
        heading: Heading in radians, 0 along the +x axis

    Returns:
        (cos, sin) of the heading
    """
    return (math.cos(heading), math.sin(heading))


def advance(point: Point2D, heading: float, distance: float) -> Point2D:
    """
    Move a point along a heading.

    Args:
        point: Start point (x, y)
        heading: Heading in radians
        distance: Distance to travel

    Returns:
        The point reached
    """
    dx, dy = heading_vector(heading)
    return (point[0] + distance * dx, point[1] + distance * dy)


def turn_sign(angle: float) -> int:
    """Return -1 for clockwise (negative) angles, +1 otherwise."""
    return -1 if angle < 0 else 1


def arc_center(start: Point2D, heading: float, radius: float, sign: int) -> Point2D:
    """
    Center of rotation for an arc leaving ``start`` along ``heading``.

    The center lies ``radius`` away, perpendicular to the heading: to the
    left for counter-clockwise turns (sign=+1) and to the right for
    clockwise turns (sign=-1).
    """
    return (
        start[0] - sign * radius * math.sin(heading),
        start[1] + sign * radius * math.cos(heading),
    )


def generate_arc_points(
    start: Point2D,
    heading: float,
    radius: float,
    angle_radians: float,
    steps: int,
) -> list[Point2D]:
    """
    Tessellate a circular arc tangent to ``heading`` at ``start``.

    Args:
        start: Arc start point
        heading: Heading at the start, in radians
        radius: Arc radius (positive)
        angle_radians: Signed sweep. Negative sweeps clockwise.
        steps: Number of equal sub-segments

    Returns:
        steps + 1 points, the first at ``start``
    """
    sign = turn_sign(angle_radians)
    sweep = abs(angle_radians)
    cx, cy = arc_center(start, heading, radius, sign)

    points: list[Point2D] = [start]
    for j in range(1, steps + 1):
        theta = heading + sign * sweep * j / steps
        points.append((
            cx + sign * radius * math.sin(theta),
            cy - sign * radius * math.cos(theta),
        ))
    return points


def distance_between_points(p1: Point2D, p2: Point2D) -> float:
    """
    Calculate the Euclidean distance between two 2D points.

    Args:
        p1: First point (x, y)
        p2: Second point (x, y)

    Returns:
        Distance between points
    """
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def points_are_close(p1: Point2D, p2: Point2D,
                     tolerance: float = POINT_MATCH_MM) -> bool:
    """
    Check if two points are within tolerance of each other.

    Args:
        p1: First point
        p2: Second point
        tolerance: Maximum distance to consider "close"

    Returns:
        True if points are within or equal to tolerance distance
    """
    return distance_between_points(p1, p2) <= tolerance


def path_length(points: list[Point2D]) -> float:
    """Sum of the segment lengths of a polyline."""
    return sum(
        distance_between_points(points[i], points[i + 1])
        for i in range(len(points) - 1)
    )


def path_bounds(points: list[Point2D]) -> tuple[float, float, float, float]:
    """
    Axis-aligned bounding box of a polyline.

    Returns:
        (min_x, min_y, max_x, max_y)

    Raises:
        ValueError: If points is empty
    """
    if not points:
        raise ValueError("Cannot compute bounds of an empty path")
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return min(xs), min(ys), max(xs), max(ys)
