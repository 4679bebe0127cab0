"""Undo/redo history built on immutable session snapshots."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from ..models import ActionType, BendSpec, MaterialProfile, TubeSpec

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SessionState:
    """Value copy of everything an action can change."""

    tube: TubeSpec
    material: MaterialProfile
    bends: tuple[BendSpec, ...] = ()


@dataclass(slots=True, frozen=True)
class HistoryEntry:
    """One undoable action with the states on either side of it."""

    action: ActionType
    before: SessionState
    after: SessionState
    timestamp: float = field(default_factory=time.time)


class HistoryManager:
    """
    Linear undo/redo stack.

    Recording a new entry discards anything that could have been redone.
    When the stack is full the oldest entry is dropped.
    """

    def __init__(self, max_size: int = 50) -> None:
        if max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self._entries: list[HistoryEntry] = []
        self._index = -1
        self._max_size = max_size
        self._applying = False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def position(self) -> int:
        """Index of the entry that would be undone next, -1 when none."""
        return self._index

    def record(self, entry: HistoryEntry) -> None:
        """Add an entry. Ignored while an undo/redo is being applied."""
        if self._applying:
            return

        del self._entries[self._index + 1:]
        self._entries.append(entry)

        if len(self._entries) > self._max_size:
            self._entries.pop(0)
        else:
            self._index += 1

        logger.debug("History: recorded %s at index %d", entry.action, self._index)

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> HistoryEntry | None:
        """Step back one entry and return it, or None if nothing to undo."""
        if not self.can_undo():
            logger.debug("History: nothing to undo")
            return None

        entry = self._entries[self._index]
        self._index -= 1
        logger.debug("History: undo %s", entry.action)
        return entry

    def redo(self) -> HistoryEntry | None:
        """Step forward one entry and return it, or None if nothing to redo."""
        if not self.can_redo():
            logger.debug("History: nothing to redo")
            return None

        self._index += 1
        entry = self._entries[self._index]
        logger.debug("History: redo %s", entry.action)
        return entry

    def clear(self) -> None:
        self._entries = []
        self._index = -1

    @contextmanager
    def applying(self) -> Iterator[None]:
        """Suppress recording while restoring a snapshot."""
        self._applying = True
        try:
            yield
        finally:
            self._applying = False

    def describe(self) -> str:
        """Human-readable listing with the current position marked."""
        if not self._entries:
            return "History empty"

        lines = [f"History ({len(self._entries)} actions, position: {self._index + 1}):"]
        for i, entry in enumerate(self._entries):
            prefix = "-> " if i == self._index else "   "
            lines.append(f"{prefix}{i + 1}. {entry.action}")
        return "\n".join(lines)
