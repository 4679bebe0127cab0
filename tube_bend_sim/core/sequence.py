"""Ordered, non-overlapping collection of bends for one tube."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..models import BendSpec
from .tolerances import MIN_BEND_SPACING_MM


class TooCloseError(ValueError):
    """Raised when a bend would sit closer than the minimum spacing to another bend."""

    def __init__(self, position_mm: float, existing_position_mm: float) -> None:
        self.position_mm = position_mm
        self.existing_position_mm = existing_position_mm
        super().__init__(
            f"Bend at {position_mm:g} mm is too close to the bend at "
            f"{existing_position_mm:g} mm (minimum spacing {MIN_BEND_SPACING_MM:g} mm)"
        )


class BendSequence:
    """
    Bends of a single tube, kept sorted by position.

    No two bends are ever closer than MIN_BEND_SPACING_MM. Indices are
    positional in the current sorted order and become stale after any
    insert or remove. The collection is private; callers get immutable
    snapshots.
    """

    def __init__(self, bends: Iterable[BendSpec] = ()) -> None:
        self._bends: list[BendSpec] = []
        for bend in bends:
            self.insert(bend)

    def __len__(self) -> int:
        return len(self._bends)

    def __iter__(self) -> Iterator[BendSpec]:
        return iter(tuple(self._bends))

    def __getitem__(self, index: int) -> BendSpec:
        return self._bends[index]

    def __repr__(self) -> str:
        return f"BendSequence({list(self._bends)!r})"

    def _check_clearance(self, bend: BendSpec) -> None:
        for existing in self._bends:
            if abs(existing.position_mm - bend.position_mm) < MIN_BEND_SPACING_MM:
                raise TooCloseError(bend.position_mm, existing.position_mm)

    def insert(self, bend: BendSpec) -> None:
        """
        Add a bend, keeping the sequence sorted.

        Raises:
            TooCloseError: If any existing bend is closer than the minimum spacing
        """
        self._check_clearance(bend)
        self._bends.append(bend)
        self._bends.sort(key=lambda b: b.position_mm)

    def remove(self, index: int) -> BendSpec | None:
        """
        Remove the bend at ``index``.

        Out-of-range indices (including negative ones) are ignored.

        Returns:
            The removed bend, or None if nothing was removed
        """
        if 0 <= index < len(self._bends):
            return self._bends.pop(index)
        return None

    def clear(self) -> None:
        """Remove all bends."""
        self._bends.clear()

    def snapshot(self) -> tuple[BendSpec, ...]:
        """Immutable copy of the current bends, in order."""
        return tuple(self._bends)

    def restore(self, bends: Iterable[BendSpec]) -> None:
        """
        Replace the whole collection.

        The current bends are kept if the replacement violates spacing.

        Raises:
            TooCloseError: If two of the new bends are too close together
        """
        replacement = BendSequence(bends)
        self._bends = replacement._bends

    @property
    def last_position(self) -> float:
        """Position of the last bend, or 0.0 when empty."""
        return self._bends[-1].position_mm if self._bends else 0.0
