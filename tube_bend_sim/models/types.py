"""Shared type aliases for tube geometry."""

from __future__ import annotations

from typing import Literal

# 2D point (x, y) in tube-local millimetres
Point2D = tuple[float, float]

# 2D vector (dx, dy)
Vector2D = tuple[float, float]

# Tessellated centerline as produced by the path generator
PathPoints = list[Point2D]

# Turn direction of a single bend as seen in the tube's plane
TurnDirection = Literal['clockwise', 'counter-clockwise']

# Kinds of undoable session actions
ActionType = Literal['add', 'remove', 'set_tube', 'set_material', 'reset', 'load']
