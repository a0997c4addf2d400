"""Authoritative text storage with cluster-aware cursor and selection."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

from . import graphemes
from .line_index import LineIndex
from .state import CursorState, Selection
from .validation import clamp_offset, ensure_boundary, ordered_range

SelectionLike = Union[Selection, Tuple[int, int]]


def is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


class Document:
    """Single source of truth for one open buffer.

    Offsets are indices into :attr:`text`. The cursor and both selection
    endpoints always sit on extended grapheme cluster boundaries. Every public
    method is total: out-of-range input is clamped, never rejected.
    """

    def __init__(self, text: str = "") -> None:
        self._content = ""
        self._lines = LineIndex()
        self._state = CursorState()
        self.version = 0
        self.set_text(text)

    @classmethod
    def from_text(cls, text: str) -> "Document":
        return cls(text)

    # ------------------------------------------------------------------
    # read-only surface

    @property
    def text(self) -> str:
        return self._content

    @property
    def cursor_position(self) -> int:
        return self._state.cursor

    @property
    def selection(self) -> Optional[Selection]:
        return self._state.selection

    @property
    def preferred_column(self) -> Optional[int]:
        return self._state.preferred_column

    @property
    def line_starts(self) -> Sequence[int]:
        return self._lines.starts

    def selected_text(self) -> str:
        selection = self._state.selection
        if selection is None:
            return ""
        return self._content[selection.lower : selection.upper]

    # ------------------------------------------------------------------
    # edits

    def set_text(self, text: str) -> None:
        """Replace the content wholesale (file load, undo/redo restore)."""

        self._content = str(text)
        self._reindex()
        self._state.reset()

    def insert(self, text: str) -> None:
        selection = self._state.take_selection()
        if selection is not None:
            self._remove(selection.start, selection.end)
        cursor = self._state.cursor
        if text:
            self._content = self._content[:cursor] + text + self._content[cursor:]
            self._reindex()
            # Inserting a base character in front of combining marks merges
            # clusters; land after the merged cluster.
            self._state.cursor = ensure_boundary(
                self._content,
                cursor + len(text),
                rounding="up",
                floor=self._line_start_for(cursor),
            )
        self._state.preferred_column = None

    def delete_range(self, start: int, end: int) -> None:
        """Delete ``start``..``end`` in either order and collapse the cursor."""

        self._state.clear_selection()
        self._remove(start, end)
        self._state.preferred_column = None

    def delete_backward(self) -> None:
        selection = self._state.take_selection()
        cursor = self._state.cursor
        if selection is not None:
            self._remove(selection.start, selection.end)
        elif cursor > 0:
            boundary = graphemes.previous_boundary(
                self._content, cursor, floor=self._line_start_for(cursor - 1)
            )
            self._remove(boundary, cursor)
        self._state.preferred_column = None

    def delete_forward(self) -> None:
        selection = self._state.take_selection()
        cursor = self._state.cursor
        if selection is not None:
            self._remove(selection.start, selection.end)
        elif cursor < len(self._content):
            self._remove(cursor, graphemes.next_boundary(self._content, cursor))
        self._state.preferred_column = None

    # ------------------------------------------------------------------
    # motion and selection

    def move_cursor(self, offset: int, extend_selection: bool = False) -> None:
        """Move by ``offset`` index units, clamped to the text.

        A landing point inside a cluster is pushed to the cluster edge in the
        direction of travel.
        """

        target = clamp_offset(self._content, self._state.cursor + offset)
        new_position = ensure_boundary(
            self._content,
            target,
            rounding="up" if offset > 0 else "down",
            floor=self._line_start_for(target),
        )
        self._state.relocate(new_position, extend_selection=extend_selection)
        self._state.preferred_column = None

    def move_by_graphemes(self, count: int, extend_selection: bool = False) -> None:
        cursor = self._state.cursor
        if count >= 0:
            target = graphemes.advance(self._content, cursor, count)
        else:
            target = graphemes.retreat(self._content, cursor, -count)
        self.move_cursor(target - cursor, extend_selection)

    def move_cursor_vertically(
        self, lines: int, extend_selection: bool = False
    ) -> None:
        """Move ``lines`` lines up (negative) or down, keeping a visual column.

        The column is captured on the first move of a run and reused until a
        horizontal move or an edit clears it.
        """

        state = self._state
        current_line = self._lines.line_at(state.cursor)
        if state.preferred_column is None:
            state.preferred_column = self.column_at_offset(state.cursor)
        preferred_column = state.preferred_column

        target_line = max(0, current_line + lines)
        if target_line >= len(self._lines):
            new_position = len(self._content)
        else:
            start, end = self._lines.line_range(target_line, include_break=False)
            new_position = graphemes.advance(
                self._content, start, preferred_column, limit=end
            )
        state.relocate(new_position, extend_selection=extend_selection)

    def select_word_at(self, offset: int) -> Selection:
        """Select the run of word characters (alphanumerics, ``_``) at ``offset``."""

        content = self._content
        line_start = self._line_start_for(offset)
        offset = ensure_boundary(content, offset, floor=line_start)

        start = offset
        preceding = list(graphemes.iter_clusters(content, line_start, offset))
        for begin, _ in reversed(preceding):
            if not is_word_char(content[begin]):
                break
            start = begin

        end = offset
        for begin, cluster_end in graphemes.iter_clusters(content, offset):
            if not is_word_char(content[begin]):
                break
            end = cluster_end

        self._state.set_selection(start, end)
        return Selection(start, end)

    def set_selection(self, selection: Optional[SelectionLike]) -> None:
        if selection is None:
            self._state.clear_selection()
            return
        start, end = selection
        self._state.set_selection(
            ensure_boundary(self._content, start, floor=self._line_start_for(start)),
            ensure_boundary(self._content, end, floor=self._line_start_for(end)),
        )

    def select_all(self) -> None:
        self._state.cursor = len(self._content)
        self._state.set_selection(0, len(self._content))
        self._state.preferred_column = None

    # ------------------------------------------------------------------
    # line queries

    def line_count(self) -> int:
        return len(self._lines)

    def line_range(
        self, index: int, *, include_break: bool = True
    ) -> Optional[Tuple[int, int]]:
        return self._lines.line_range(index, include_break=include_break)

    def line_at_offset(self, offset: int) -> int:
        return self._lines.line_at(offset)

    def column_at_offset(self, offset: int) -> int:
        """Clusters between the start of the offset's line and the offset."""

        line_start = self._line_start_for(offset)
        offset = ensure_boundary(self._content, offset, floor=line_start)
        return graphemes.count(self._content, line_start, offset)

    def byte_offset(self, offset: int) -> int:
        """UTF-8 byte offset of a text index, for hosts addressing bytes."""

        prefix = self._content[: clamp_offset(self._content, offset)]
        return len(prefix.encode("utf-8"))

    def offset_from_byte(self, byte_offset: int) -> int:
        encoded = self._content.encode("utf-8")[: max(0, byte_offset)]
        return len(encoded.decode("utf-8", errors="ignore"))

    # ------------------------------------------------------------------
    # internals

    def _line_start_for(self, offset: int) -> int:
        return self._lines.starts[self._lines.line_at(offset)]

    def _remove(self, start: int, end: int) -> None:
        lower, upper = ordered_range(self._content, start, end)
        if lower < upper:
            self._content = self._content[:lower] + self._content[upper:]
            self._reindex()
        self._state.cursor = ensure_boundary(
            self._content, lower, floor=self._line_start_for(lower)
        )

    def _reindex(self) -> None:
        self._lines = LineIndex.build(self._content)
        self.version += 1


__all__ = ["Document", "SelectionLike", "is_word_char"]
