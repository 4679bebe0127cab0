"""
Tests for the standard tube catalog.

Run with: pytest tests/test_tube_standards.py -v
"""
import pytest

from tube_bend_sim.storage.tube_standards import STANDARD_TUBES, TubeCatalog, TubeStandard


@pytest.fixture
def catalog() -> TubeCatalog:
    return TubeCatalog()


class TestTubeStandard:
    def test_inner_diameter(self) -> None:
        tube = TubeStandard('1/2"', 21.3, 2.65, 101, 'NF', 'Medium/Heavy')
        assert tube.inner_diameter == pytest.approx(16.0)

    def test_description(self) -> None:
        tube = TubeStandard('Copper 16mm', 16, 1.0, 80, 'EN 1057', 'Annealed')
        assert tube.description == "Copper 16mm - Ø16mm × 1mm - Annealed (EN 1057)"

    def test_to_tube_spec(self) -> None:
        spec = STANDARD_TUBES[0].to_tube_spec(1500)
        assert spec.outer_diameter == 17.2
        assert spec.wall_thickness == 2.35
        assert spec.total_length == 1500

    def test_catalog_walls_below_radius(self) -> None:
        for tube in STANDARD_TUBES:
            assert tube.wall_thickness < tube.outer_diameter / 2


class TestTubeCatalog:
    def test_size(self, catalog: TubeCatalog) -> None:
        assert len(catalog) == 27

    def test_by_designation(self, catalog: TubeCatalog) -> None:
        tube = catalog.by_designation('2"')
        assert tube is not None
        assert tube.outer_diameter == 60.3

    def test_by_designation_missing(self, catalog: TubeCatalog) -> None:
        assert catalog.by_designation('5"') is None

    def test_by_standard(self, catalog: TubeCatalog) -> None:
        copper = catalog.by_standard('EN 1057')
        assert len(copper) == 7
        assert all(t.series == 'Annealed' for t in copper)

    def test_by_series(self, catalog: TubeCatalog) -> None:
        assert len(catalog.by_series('Light')) == 6

    def test_standards_in_order(self, catalog: TubeCatalog) -> None:
        assert catalog.standards() == ['NF', 'EN 1057', 'NF DTU 65.10']

    def test_series_in_order(self, catalog: TubeCatalog) -> None:
        assert catalog.series() == ['Medium/Heavy', 'Light', 'Annealed', 'Standard']

    def test_custom_catalog(self) -> None:
        catalog = TubeCatalog((TubeStandard('X', 10, 1, 50, 'Shop', 'Any'),))
        assert [t.designation for t in catalog.all()] == ['X']
