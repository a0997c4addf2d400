"""Bounded undo/redo history of whole-document snapshots."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional


@dataclass(frozen=True, slots=True)
class Snapshot:
    text: str
    cursor: int = 0


class UndoHistory:
    """Two bounded stacks: push on commit, pop on undo, redo cleared by edits.

    When a stack is full the oldest snapshot is dropped.
    """

    def __init__(self, limit: int = 100) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self._undo: Deque[Snapshot] = deque(maxlen=limit)
        self._redo: Deque[Snapshot] = deque(maxlen=limit)

    def __len__(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def push(self, before: Snapshot) -> None:
        """Record the state that preceded a committed edit."""

        self._undo.append(before)
        self._redo.clear()

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def undo(self, current: Snapshot) -> Optional[Snapshot]:
        """Return the snapshot to restore, parking ``current`` for redo."""

        if not self._undo:
            return None
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: Snapshot) -> Optional[Snapshot]:
        if not self._redo:
            return None
        self._undo.append(current)
        return self._redo.pop()

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()


__all__ = ["Snapshot", "UndoHistory"]
