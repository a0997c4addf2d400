"""Editing session: one document plus its history, registers, and spans."""

from __future__ import annotations

from contextlib import AbstractContextManager, contextmanager
from typing import ContextManager, Iterator, Optional, Sequence, Tuple

from edit_engine.buffer import (
    BufferMirror,
    Document,
    RegisterBank,
    Selection,
    Snapshot,
    UndoHistory,
)
from edit_engine.buffer import search
from edit_engine.buffer.registers import CLIPBOARD
from edit_engine.config import EngineConfig
from edit_engine.runtime import telemetry
from edit_engine.scanner import Span, get_lexicon, scan

from .hooks import SessionHooks


class EditTransaction(AbstractContextManager["EditTransaction"]):
    """Profiles one edit and records an undo snapshot if the text changed."""

    def __init__(self, session: "EditorSession", label: str) -> None:
        self.session = session
        self.label = label
        self.changed = False
        self._before: Optional[Snapshot] = None
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None

    def __enter__(self) -> "EditTransaction":
        self._before = self.session.snapshot()
        self._span_cm = telemetry.span(
            name=f"session::{self.label}",
            logger_name="edit_engine.session",
            component="session",
            metadata={"buffer": self.session.name},
        )
        self._handle = self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is None and self._before is not None:
                after = self.session.document.text
                self.changed = after != self._before.text
                if self.changed:
                    self.session.history.push(self._before)
                if self._handle is not None:
                    self._handle.add_metadata("changed", self.changed)
                    self._handle.add_metadata("length", len(after))
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False


class EditorSession:
    """Owned editor state handed explicitly to whichever component needs it.

    All edits run through :class:`EditTransaction`; after a committed text
    change the session rescans and notifies the host hooks. Access must be
    serialized by the caller.
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: str = "untitled",
        config: Optional[EngineConfig] = None,
        registers: Optional[RegisterBank] = None,
        history: Optional[UndoHistory] = None,
        hooks: Optional[SessionHooks] = None,
    ) -> None:
        self.name = name
        self.config = config or EngineConfig.from_env()
        self.lexicon = get_lexicon(self.config.lexicon)
        self.document = Document(text)
        self.registers = registers or RegisterBank()
        self.history = history or UndoHistory(self.config.undo_limit)
        self.hooks = hooks
        self._saved_text = self.document.text
        self._spans: Tuple[Span, ...] = tuple(scan(self.document.text, self.lexicon))
        self._publish(rescanned=True)

    # ------------------------------------------------------------------
    # state

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def spans(self) -> Sequence[Span]:
        return self._spans

    @property
    def is_modified(self) -> bool:
        return self.document.text != self._saved_text

    def snapshot(self) -> Snapshot:
        return Snapshot(text=self.document.text, cursor=self.document.cursor_position)

    def mark_saved(self) -> None:
        self._saved_text = self.document.text
        self._publish()

    def load_text(self, text: str) -> None:
        """Replace the buffer (file open); history is discarded."""

        self.document.set_text(text)
        self.history.clear()
        self._saved_text = self.document.text
        telemetry.record_event(
            "session.load",
            level="debug",
            data={"buffer": self.name, "length": len(text)},
            logger_name="edit_engine.session",
        )
        self.rescan()

    def rescan(self) -> Sequence[Span]:
        self._spans = tuple(scan(self.document.text, self.lexicon))
        self._publish(rescanned=True)
        return self._spans

    # ------------------------------------------------------------------
    # edits

    def insert(self, text: str) -> None:
        with self._edit("insert"):
            self.document.insert(text)

    def delete_backward(self) -> None:
        with self._edit("delete_backward"):
            self.document.delete_backward()

    def delete_forward(self) -> None:
        with self._edit("delete_forward"):
            self.document.delete_forward()

    def undo(self) -> bool:
        snapshot = self.history.undo(self.snapshot())
        if snapshot is None:
            return False
        self._restore(snapshot, label="undo")
        return True

    def redo(self) -> bool:
        snapshot = self.history.redo(self.snapshot())
        if snapshot is None:
            return False
        self._restore(snapshot, label="redo")
        return True

    # ------------------------------------------------------------------
    # clipboard

    def copy(self, register: str = CLIPBOARD) -> Optional[str]:
        selection = self.document.selection
        if selection is None or selection.is_empty:
            return None
        text = self.document.selected_text()
        self.registers.yank_to(register, text, source="copy")
        return text

    def cut(self, register: str = CLIPBOARD) -> Optional[str]:
        selection = self.document.selection
        if selection is None or selection.is_empty:
            return None
        text = self.document.selected_text()
        self.registers.yank_to(register, text, source="cut")
        with self._edit("cut"):
            self.document.delete_range(selection.start, selection.end)
        return text

    def paste(self, register: str = CLIPBOARD) -> bool:
        text = self.registers.get(register).text
        if not text:
            return False
        with self._edit("paste"):
            self.document.insert(text)
        return True

    # ------------------------------------------------------------------
    # find / replace

    def find_next(self, needle: str) -> Optional[Selection]:
        """Select the next case-insensitive match after the cursor or selection."""

        selection = self.document.selection
        origin = selection.upper if selection else self.document.cursor_position
        match = search.find_next(self.document.text, needle, origin)
        if match is None:
            return None
        start, end = match
        self.document.move_cursor(start - self.document.cursor_position)
        self.document.move_cursor(end - start, extend_selection=True)
        self._publish()
        return self.document.selection

    def replace(self, needle: str, replacement: str) -> bool:
        """Replace the selected match, or the next one; ``False`` if none."""

        selection = self.document.selection
        on_match = selection is not None and search.find_next(
            self.document.text, needle, selection.lower
        ) == (selection.lower, selection.upper)
        if not on_match:
            if self.find_next(needle) is None:
                return False
        with self._edit("replace"):
            self.document.insert(replacement)
        return True

    def replace_all(self, needle: str, replacement: str) -> int:
        new_text, count = search.replace_all(self.document.text, needle, replacement)
        if not count:
            return 0
        cursor = self.document.cursor_position
        with self._edit("replace_all"):
            self.document.set_text(new_text)
            self.document.move_cursor(cursor)
        return count

    # ------------------------------------------------------------------
    # motion (no text change, spans are reused)

    def move_cursor(self, offset: int, extend_selection: bool = False) -> None:
        self.document.move_cursor(offset, extend_selection)
        self._publish()

    def move_by_graphemes(self, count: int, extend_selection: bool = False) -> None:
        self.document.move_by_graphemes(count, extend_selection)
        self._publish()

    def move_vertically(self, lines: int, extend_selection: bool = False) -> None:
        self.document.move_cursor_vertically(lines, extend_selection)
        self._publish()

    def select_word_at_cursor(self) -> Selection:
        selection = self.document.select_word_at(self.document.cursor_position)
        self._publish()
        return selection

    def select_all(self) -> None:
        self.document.select_all()
        self._publish()

    def set_selection(self, selection: Optional[Tuple[int, int]]) -> None:
        self.document.set_selection(selection)
        self._publish()

    # ------------------------------------------------------------------
    # status and host sync

    def cursor_line_column(self) -> Tuple[int, int]:
        """One-based (line, column) of the cursor for status display."""

        cursor = self.document.cursor_position
        return (
            self.document.line_at_offset(cursor) + 1,
            self.document.column_at_offset(cursor) + 1,
        )

    def status_line(self) -> str:
        line, column = self.cursor_line_column()
        marker = "*" if self.is_modified else ""
        return f"{marker}Line: {line} Col: {column}"

    def current_line_range(self) -> Tuple[int, int]:
        index = self.document.line_at_offset(self.document.cursor_position)
        line_range = self.document.line_range(index, include_break=False)
        assert line_range is not None
        return line_range

    def pull_buffer(self) -> BufferMirror:
        cursor = self.document.cursor_position
        return BufferMirror(
            text=self.document.text,
            cursor=cursor,
            selection=self.document.selection,
            line=self.document.line_at_offset(cursor),
            column=self.document.column_at_offset(cursor),
            version=self.document.version,
            modified=self.is_modified,
            attributes={"buffer": self.name, "lexicon": self.lexicon.name},
        )

    def push_host_edit(self, mirror: BufferMirror) -> None:
        """Adopt a host-side change; text changes become one undoable edit."""

        if mirror.text != self.document.text:
            with self._edit("host_edit"):
                self._place(mirror.text, mirror.cursor)
        else:
            self.document.move_cursor(mirror.cursor - self.document.cursor_position)
            self._publish()
        if mirror.selection is not None:
            self.document.set_selection(mirror.selection)
            self._publish()

    # ------------------------------------------------------------------
    # internals

    @contextmanager
    def _edit(self, label: str) -> Iterator[EditTransaction]:
        with EditTransaction(self, label) as transaction:
            yield transaction
        rescanned = transaction.changed and self.config.scan_on_edit
        if rescanned:
            self._spans = tuple(scan(self.document.text, self.lexicon))
        self._publish(rescanned=rescanned)

    def _place(self, text: str, cursor: int) -> None:
        self.document.set_text(text)
        self.document.move_cursor(cursor)

    def _restore(self, snapshot: Snapshot, *, label: str) -> None:
        with telemetry.span(
            f"session::{label}",
            logger_name="edit_engine.session",
            component="session",
            metadata={"buffer": self.name, "redo_depth": self.history.redo_depth},
        ):
            self._place(snapshot.text, snapshot.cursor)
        self.rescan()

    def _publish(self, *, rescanned: bool = False) -> None:
        if self.hooks is None:
            return
        mirror = self.pull_buffer()
        self.hooks.update_buffer(mirror)
        if rescanned:
            self.hooks.update_spans(self._spans)
        status = self.status_line()
        self.hooks.update_status(status)
        self.hooks.log(
            f"publish buffer={self.name!r} version={mirror.version} "
            f"cursor={mirror.cursor} spans={len(self._spans)} status={status!r}"
        )


__all__ = ["EditTransaction", "EditorSession"]
