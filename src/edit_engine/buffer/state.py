"""Cursor, selection, and vertical-motion state for documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional


class Selection(NamedTuple):
    """Selected range; ``start`` is not necessarily the lower bound."""

    start: int
    end: int

    @property
    def lower(self) -> int:
        return min(self.start, self.end)

    @property
    def upper(self) -> int:
        return max(self.start, self.end)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(slots=True)
class CursorState:
    """Mutable cursor + selection info for one document."""

    cursor: int = 0
    selection: Optional[Selection] = None
    preferred_column: Optional[int] = None

    def reset(self) -> None:
        self.cursor = 0
        self.selection = None
        self.preferred_column = None

    def clear_selection(self) -> None:
        self.selection = None

    def set_selection(self, start: int, end: int) -> None:
        self.selection = Selection(start, end)

    def take_selection(self) -> Optional[Selection]:
        selection, self.selection = self.selection, None
        return selection

    def relocate(self, new_position: int, *, extend_selection: bool) -> None:
        """Move the cursor, growing the selection from its fixed end if asked.

        The endpoint equal to the old cursor is the one that moves; with no
        selection the old cursor becomes the anchor.
        """

        if extend_selection:
            current = self.selection
            if current is None:
                self.selection = Selection(self.cursor, new_position)
            elif current.start == self.cursor:
                self.selection = Selection(new_position, current.end)
            else:
                self.selection = Selection(current.start, new_position)
        else:
            self.selection = None
        self.cursor = new_position


__all__ = ["CursorState", "Selection"]
