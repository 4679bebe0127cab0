"""Interactive bending session: validated edits with undo/redo."""

from __future__ import annotations

import logging

from .. import config
from ..models import (
    ActionType,
    BendSpec,
    MaterialProfile,
    PathPoints,
    SimulationMetrics,
    TubeSpec,
    ValidationResult,
)
from .history import HistoryEntry, HistoryManager, SessionState
from .metrics import compute_metrics
from .path_generator import compute_path
from .sequence import BendSequence
from .validation import validate_bend

logger = logging.getLogger(__name__)


class BendSession:
    """
    Owns one tube, its material and bend sequence.

    Every bend goes through validate_bend before reaching the sequence.
    Mutations are recorded as snapshot pairs so undo/redo never aliases
    the live sequence.
    """

    def __init__(
        self,
        tube: TubeSpec,
        material: MaterialProfile,
        history_size: int = config.HISTORY_MAX_SIZE,
    ) -> None:
        self._tube = tube
        self._material = material
        self._bends = BendSequence()
        self._history = HistoryManager(max_size=history_size)

    @property
    def tube(self) -> TubeSpec:
        return self._tube

    @property
    def material(self) -> MaterialProfile:
        return self._material

    @property
    def bends(self) -> tuple[BendSpec, ...]:
        return self._bends.snapshot()

    @property
    def history(self) -> HistoryManager:
        return self._history

    def state(self) -> SessionState:
        """Immutable snapshot of the session."""
        return SessionState(self._tube, self._material, self._bends.snapshot())

    def _apply(self, state: SessionState) -> None:
        self._bends.restore(state.bends)
        self._tube = state.tube
        self._material = state.material

    def _record(self, action: ActionType, before: SessionState) -> None:
        self._history.record(HistoryEntry(action, before, self.state()))

    def add_bend(self, bend: BendSpec) -> ValidationResult:
        """
        Validate and insert a bend.

        Invalid bends are not inserted; the result explains why. Warnings do
        not prevent insertion.

        Raises:
            TooCloseError: If the bend is too close to an existing one
        """
        result = validate_bend(self._tube, bend, self._material)
        if not result.is_valid:
            logger.info("Rejected %r: %s", bend, "; ".join(result.errors))
            return result

        before = self.state()
        self._bends.insert(bend)
        for warning in result.warnings:
            logger.warning("%r: %s", bend, warning)
        self._record('add', before)
        return result

    def remove_bend(self, index: int) -> BendSpec | None:
        """Remove the bend at ``index``; out-of-range indices are ignored."""
        before = self.state()
        removed = self._bends.remove(index)
        if removed is not None:
            self._record('remove', before)
        return removed

    def reset(self) -> None:
        """Remove all bends."""
        if not len(self._bends):
            return
        before = self.state()
        self._bends.clear()
        self._record('reset', before)

    def set_tube(self, tube: TubeSpec) -> None:
        if tube == self._tube:
            return
        before = self.state()
        self._tube = tube
        self._record('set_tube', before)

    def set_material(self, material: MaterialProfile) -> None:
        if material == self._material:
            return
        before = self.state()
        self._material = material
        self._record('set_material', before)

    def load(self, tube: TubeSpec, material: MaterialProfile,
             bends: tuple[BendSpec, ...]) -> None:
        """
        Replace the whole session, e.g. from a saved project.

        Raises:
            TooCloseError: If the bends violate spacing; the session is unchanged
        """
        before = self.state()
        self._apply(SessionState(tube, material, tuple(bends)))
        self._record('load', before)

    def undo(self) -> bool:
        """Revert the last action. Returns False if there was nothing to undo."""
        entry = self._history.undo()
        if entry is None:
            return False
        with self._history.applying():
            self._apply(entry.before)
        return True

    def redo(self) -> bool:
        """Re-apply the last undone action. Returns False if there was nothing to redo."""
        entry = self._history.redo()
        if entry is None:
            return False
        with self._history.applying():
            self._apply(entry.after)
        return True

    def simulate(self) -> PathPoints:
        """Centerline polyline for the current state."""
        state = self.state()
        return compute_path(state.tube, state.bends, state.material)

    def metrics(self) -> SimulationMetrics:
        """Manufacturing metrics for the current state."""
        state = self.state()
        return compute_metrics(state.tube, state.bends, state.material)
