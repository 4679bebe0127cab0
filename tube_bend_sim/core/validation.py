"""Physical feasibility checks for a single bend.

Sequence-level spacing is enforced by BendSequence; this module only judges
a bend against its tube and material. Validators never raise: every problem
is reported in a ValidationResult so the caller can decide whether to block
or warn. These are the only user-facing messages the core produces.
"""

from __future__ import annotations

from ..models import BendSpec, MaterialProfile, TubeSpec, ValidationResult
from .formatting import format_angle, format_length
from .metrics import minimum_radius
from .tolerances import MAX_ANGLE_DEGREES, MIN_ANGLE_DEGREES, NEAR_LIMIT_RATIO


def validate_tube(tube: TubeSpec) -> ValidationResult:
    """
    Check tube dimensions on their own.

    Args:
        tube: Tube stock specification

    Returns:
        ValidationResult; only errors are produced
    """
    errors: list[str] = []

    if tube.outer_diameter <= 0:
        errors.append(
            f"Outer diameter must be positive, got {format_length(tube.outer_diameter)}"
        )
    if tube.total_length <= 0:
        errors.append(
            f"Tube length must be positive, got {format_length(tube.total_length)}"
        )
    if tube.wall_thickness <= 0:
        errors.append(
            f"Wall thickness must be positive, got {format_length(tube.wall_thickness)}"
        )
    elif tube.wall_thickness >= tube.outer_diameter / 2:
        errors.append(
            f"Wall thickness {format_length(tube.wall_thickness)}: "
            f"thickness invalid, must be less than tube radius "
            f"({format_length(tube.outer_diameter / 2)})"
        )

    return ValidationResult(is_valid=not errors, errors=errors)


def validate_bend(
    tube: TubeSpec,
    bend: BendSpec,
    material: MaterialProfile,
) -> ValidationResult:
    """
    Check a candidate bend against tube geometry and material limits.

    Every rule is evaluated; order only affects message order:
      1. Radius below the material minimum is an error; below
         NEAR_LIMIT_RATIO times the minimum is a warning.
      2. Position outside [0, total_length] is an error.
      3. Angle magnitude under MIN_ANGLE_DEGREES is an error; over
         MAX_ANGLE_DEGREES is a warning.
      4. Tube dimension errors from validate_tube.

    Args:
        tube: Tube the bend applies to
        bend: Candidate bend
        material: Material supplying the minimum radius factor

    Returns:
        ValidationResult; is_valid is False only when errors were found
    """
    errors: list[str] = []
    warnings: list[str] = []

    min_radius = minimum_radius(tube.outer_diameter, material)
    if bend.bend_radius < min_radius:
        errors.append(
            f"Bend radius {format_length(bend.bend_radius)}: radius too small, "
            f"minimum for this tube is {format_length(min_radius)}"
        )
    elif bend.bend_radius < min_radius * NEAR_LIMIT_RATIO:
        warnings.append(
            f"Bend radius {format_length(bend.bend_radius)} is near the limit "
            f"({format_length(min_radius)}): risk of collapse/wrinkling"
        )

    if not 0 <= bend.position_mm <= tube.total_length:
        errors.append(
            f"Bend position {format_length(bend.position_mm)}: position out of range, "
            f"must be between 0 and {format_length(tube.total_length)}"
        )

    magnitude = abs(bend.angle_degrees)
    if magnitude < MIN_ANGLE_DEGREES:
        errors.append(
            f"Bend angle {format_angle(bend.angle_degrees, 2)}: angle too small, "
            f"minimum is {format_angle(MIN_ANGLE_DEGREES)}"
        )
    elif magnitude > MAX_ANGLE_DEGREES:
        warnings.append(
            f"Bend angle {format_angle(bend.angle_degrees)} exceeds "
            f"{format_angle(MAX_ANGLE_DEGREES)}: verify intended angle"
        )

    errors.extend(validate_tube(tube).errors)

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
