"""
Tests for tube, bend and result models.

Run with: pytest tests/test_models.py -v
"""
import dataclasses

import pytest

from tube_bend_sim.models import (
    BendMetrics,
    BendSpec,
    SimulationMetrics,
    TubeSpec,
    ValidationResult,
)


class TestTubeSpec:
    def test_inner_diameter(self) -> None:
        tube = TubeSpec(outer_diameter=20, wall_thickness=1.5, total_length=1000)
        assert tube.inner_diameter == 17

    def test_immutable(self) -> None:
        tube = TubeSpec(outer_diameter=20, wall_thickness=1.5, total_length=1000)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tube.total_length = 5  # type: ignore[misc]

    def test_from_dict_coerces_numbers(self) -> None:
        tube = TubeSpec.from_dict({'outer_diameter': 20, 'wall_thickness': 2,
                                   'total_length': 800})
        assert tube.total_length == 800.0
        assert isinstance(tube.total_length, float)


class TestBendSpec:
    def test_direction(self) -> None:
        assert BendSpec(-90, 100, 10).is_clockwise is True
        assert BendSpec(-90, 100, 10).direction == 'clockwise'
        assert BendSpec(45, 100, 10).direction == 'counter-clockwise'

    def test_dict_roundtrip(self) -> None:
        bend = BendSpec(angle_degrees=-30.5, bend_radius=120, position_mm=250)
        assert BendSpec.from_dict(bend.to_dict()) == bend

    def test_hashable_value(self) -> None:
        assert len({BendSpec(90, 100, 10), BendSpec(90, 100, 10)}) == 1

    def test_repr(self) -> None:
        assert repr(BendSpec(90, 100, 10)) == "BendSpec(angle=90.0, radius=100.0, at=10.0)"


class TestResults:
    def test_validation_result_defaults(self) -> None:
        result = ValidationResult(is_valid=True)
        assert result.errors == []
        assert result.warnings == []
        assert result.has_warnings is False

    def test_simulation_metrics_bend_count(self) -> None:
        bend = BendMetrics(index=1, position_mm=10, angle_degrees=90, applied_angle=92.3,
                           applied_radius=102.6, deduction_value=100, arc_length=157.1)
        metrics = SimulationMetrics(developed_length=1000, minimum_radius=400,
                                    per_bend=[bend])
        assert metrics.bend_count == 1
        assert "#1" in repr(bend)
