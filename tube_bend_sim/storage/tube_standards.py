"""Catalog of standard commercial tube sizes."""

from __future__ import annotations

from dataclasses import dataclass

from ..models import TubeSpec


@dataclass(slots=True, frozen=True)
class TubeStandard:
    """
    A commercially available tube size.

    Attributes:
        designation: Trade designation (e.g., '1/2"', "Copper 16mm")
        outer_diameter: Outer diameter in mm
        wall_thickness: Wall thickness in mm
        recommended_radius: Recommended bend radius in mm
        standard: Reference standard (e.g., "NF", "EN 1057")
        series: Wall series (e.g., "Light", "Medium/Heavy")
    """

    designation: str
    outer_diameter: float
    wall_thickness: float
    recommended_radius: float
    standard: str
    series: str

    @property
    def inner_diameter(self) -> float:
        return self.outer_diameter - 2 * self.wall_thickness

    @property
    def description(self) -> str:
        return (
            f"{self.designation} - Ø{self.outer_diameter:g}mm × "
            f"{self.wall_thickness:g}mm - {self.series} ({self.standard})"
        )

    def to_tube_spec(self, total_length: float) -> TubeSpec:
        """TubeSpec for a length of this tube."""
        return TubeSpec(
            outer_diameter=self.outer_diameter,
            wall_thickness=self.wall_thickness,
            total_length=total_length,
        )


# Steel gas tube (medium/heavy and light series), annealed copper and PEX
STANDARD_TUBES: tuple[TubeStandard, ...] = (
    TubeStandard('3/8"', 17.2, 2.35, 82, 'NF', 'Medium/Heavy'),
    TubeStandard('1/2"', 21.3, 2.65, 101, 'NF', 'Medium/Heavy'),
    TubeStandard('3/4"', 26.9, 2.65, 128, 'NF', 'Medium/Heavy'),
    TubeStandard('1"', 33.7, 3.25, 160, 'NF', 'Medium/Heavy'),
    TubeStandard('1"1/4', 42.4, 3.25, 201, 'NF', 'Medium/Heavy'),
    TubeStandard('1"1/2', 48.3, 3.25, 229, 'NF', 'Medium/Heavy'),
    TubeStandard('2"', 60.3, 3.65, 286, 'NF', 'Medium/Heavy'),
    TubeStandard('2"1/2', 76.1, 3.65, 361, 'NF', 'Medium/Heavy'),
    TubeStandard('3"', 88.9, 4.05, 422, 'NF', 'Medium/Heavy'),
    TubeStandard('4"', 114.3, 4.50, 542, 'NF', 'Medium/Heavy'),
    TubeStandard('3/8" light', 17.2, 1.80, 82, 'NF', 'Light'),
    TubeStandard('1/2" light', 21.3, 2.00, 101, 'NF', 'Light'),
    TubeStandard('3/4" light', 26.9, 2.00, 128, 'NF', 'Light'),
    TubeStandard('1" light', 33.7, 2.50, 160, 'NF', 'Light'),
    TubeStandard('1"1/4 light', 42.4, 2.50, 201, 'NF', 'Light'),
    TubeStandard('1"1/2 light', 48.3, 2.50, 229, 'NF', 'Light'),
    TubeStandard('Copper 12mm', 12, 1.0, 60, 'EN 1057', 'Annealed'),
    TubeStandard('Copper 14mm', 14, 1.0, 70, 'EN 1057', 'Annealed'),
    TubeStandard('Copper 16mm', 16, 1.0, 80, 'EN 1057', 'Annealed'),
    TubeStandard('Copper 18mm', 18, 1.0, 90, 'EN 1057', 'Annealed'),
    TubeStandard('Copper 22mm', 22, 1.0, 110, 'EN 1057', 'Annealed'),
    TubeStandard('Copper 28mm', 28, 1.5, 140, 'EN 1057', 'Annealed'),
    TubeStandard('Copper 35mm', 35, 1.5, 175, 'EN 1057', 'Annealed'),
    TubeStandard('PEX 12x1.1', 12, 1.1, 60, 'NF DTU 65.10', 'Standard'),
    TubeStandard('PEX 16x1.5', 16, 1.5, 80, 'NF DTU 65.10', 'Standard'),
    TubeStandard('PEX 20x1.9', 20, 1.9, 100, 'NF DTU 65.10', 'Standard'),
    TubeStandard('PEX 25x2.3', 25, 2.3, 125, 'NF DTU 65.10', 'Standard'),
)


class TubeCatalog:
    """Read-only lookup over a set of standard tubes."""

    def __init__(self, tubes: tuple[TubeStandard, ...] = STANDARD_TUBES) -> None:
        self._tubes = tuple(tubes)

    def __len__(self) -> int:
        return len(self._tubes)

    def all(self) -> list[TubeStandard]:
        return list(self._tubes)

    def by_standard(self, standard: str) -> list[TubeStandard]:
        return [t for t in self._tubes if t.standard == standard]

    def by_series(self, series: str) -> list[TubeStandard]:
        return [t for t in self._tubes if t.series == series]

    def by_designation(self, designation: str) -> TubeStandard | None:
        for tube in self._tubes:
            if tube.designation == designation:
                return tube
        return None

    def standards(self) -> list[str]:
        """Distinct standards in catalog order."""
        return list(dict.fromkeys(t.standard for t in self._tubes))

    def series(self) -> list[str]:
        """Distinct series in catalog order."""
        return list(dict.fromkeys(t.series for t in self._tubes))
