"""Validation and metrics result models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ValidationResult:
    """Outcome of checking a bend against its tube and material.

    Errors block the bend; warnings are informational only.
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


@dataclass(slots=True)
class BendMetrics:
    """Manufacturing values for a single bend."""

    index: int
    position_mm: float
    angle_degrees: float
    applied_angle: float  # Degrees, over-bent for springback
    applied_radius: float  # mm, radius compensated for springback
    deduction_value: float  # mm, "value A"
    arc_length: float  # mm, along the nominal radius

    def __repr__(self) -> str:
        return (
            f"BendMetrics(#{self.index}, angle={self.angle_degrees:.1f}, "
            f"applied={self.applied_angle:.2f}, A={self.deduction_value:.2f})"
        )


@dataclass(slots=True)
class SimulationMetrics:
    """Scalar results for a tube and its bend sequence."""

    developed_length: float
    minimum_radius: float
    per_bend: list[BendMetrics] = field(default_factory=list)

    @property
    def bend_count(self) -> int:
        return len(self.per_bend)
