"""Tube, bend and material specification models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict

from .types import TurnDirection


class TubeSpecDict(TypedDict):
    """Type definition for TubeSpec serialization."""

    outer_diameter: float
    wall_thickness: float
    total_length: float


class BendSpecDict(TypedDict):
    """Type definition for BendSpec serialization."""

    angle_degrees: float
    bend_radius: float
    position_mm: float


class MaterialProfileDict(TypedDict):
    """Type definition for MaterialProfile serialization."""

    name: str
    springback_coefficient: float
    min_radius_factor: float
    description: str


def validate_material_values(
    springback_coefficient: float | None = None,
    min_radius_factor: float | None = None,
) -> None:
    """Validate material numeric values.

    Args:
        springback_coefficient: Springback coefficient (must be in (0, 1] if provided)
        min_radius_factor: Minimum radius factor (must be positive if provided)

    Raises:
        ValueError: If any value violates its constraint
    """
    if springback_coefficient is not None and not 0 < springback_coefficient <= 1:
        raise ValueError(
            f"springback_coefficient must be in (0, 1], got {springback_coefficient}"
        )
    if min_radius_factor is not None and min_radius_factor <= 0:
        raise ValueError(f"min_radius_factor must be positive, got {min_radius_factor}")


@dataclass(slots=True, frozen=True)
class TubeSpec:
    """
    Straight tube stock before bending.

    Attributes:
        outer_diameter: Outer diameter in mm
        wall_thickness: Wall thickness in mm (must stay below outer_diameter / 2)
        total_length: Straight length in mm
    """

    outer_diameter: float
    wall_thickness: float
    total_length: float

    @property
    def inner_diameter(self) -> float:
        return self.outer_diameter - 2 * self.wall_thickness

    def to_dict(self) -> TubeSpecDict:
        """Convert to dictionary for JSON serialization."""
        return TubeSpecDict(
            outer_diameter=self.outer_diameter,
            wall_thickness=self.wall_thickness,
            total_length=self.total_length,
        )

    @classmethod
    def from_dict(cls, data: TubeSpecDict) -> TubeSpec:
        """Create TubeSpec from dictionary."""
        return cls(
            outer_diameter=float(data['outer_diameter']),
            wall_thickness=float(data['wall_thickness']),
            total_length=float(data['total_length']),
        )


@dataclass(slots=True, frozen=True)
class BendSpec:
    """
    One bend along the tube.

    Attributes:
        angle_degrees: Signed bend angle. Positive turns counter-clockwise,
            negative turns clockwise.
        bend_radius: Inside-bend radius in mm, before springback compensation
        position_mm: Distance from the tube start to the bend
    """

    angle_degrees: float
    bend_radius: float
    position_mm: float

    def __repr__(self) -> str:
        return (
            f"BendSpec(angle={self.angle_degrees:.1f}, "
            f"radius={self.bend_radius:.1f}, at={self.position_mm:.1f})"
        )

    @property
    def is_clockwise(self) -> bool:
        return self.angle_degrees < 0

    @property
    def direction(self) -> TurnDirection:
        return 'clockwise' if self.is_clockwise else 'counter-clockwise'

    def to_dict(self) -> BendSpecDict:
        """Convert to dictionary for JSON serialization."""
        return BendSpecDict(
            angle_degrees=self.angle_degrees,
            bend_radius=self.bend_radius,
            position_mm=self.position_mm,
        )

    @classmethod
    def from_dict(cls, data: BendSpecDict) -> BendSpec:
        """Create BendSpec from dictionary."""
        return cls(
            angle_degrees=float(data['angle_degrees']),
            bend_radius=float(data['bend_radius']),
            position_mm=float(data['position_mm']),
        )


@dataclass(slots=True, frozen=True)
class MaterialProfile:
    """
    Bending properties of a tube material.

    Attributes:
        springback_coefficient: Fraction of the imparted bend that remains
            after release. Applied radius is bend_radius / springback_coefficient.
        min_radius_factor: Minimum safe bend radius as a multiple of the
            outer diameter
        name: Display name (e.g., "Mild steel")
        description: Optional notes about the material
    """

    springback_coefficient: float
    min_radius_factor: float
    name: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        """Validate numeric fields."""
        validate_material_values(
            springback_coefficient=self.springback_coefficient,
            min_radius_factor=self.min_radius_factor,
        )

    def __repr__(self) -> str:
        return (
            f"MaterialProfile(name={self.name!r}, "
            f"springback={self.springback_coefficient}, "
            f"min_radius_factor={self.min_radius_factor})"
        )

    def to_dict(self) -> MaterialProfileDict:
        """Convert to dictionary for JSON serialization."""
        return MaterialProfileDict(
            name=self.name,
            springback_coefficient=self.springback_coefficient,
            min_radius_factor=self.min_radius_factor,
            description=self.description,
        )

    @classmethod
    def from_dict(cls, data: MaterialProfileDict) -> MaterialProfile:
        """Create MaterialProfile from dictionary."""
        return cls(
            springback_coefficient=float(data['springback_coefficient']),
            min_radius_factor=float(data['min_radius_factor']),
            name=data.get('name', ''),
            description=data.get('description', ''),
        )
