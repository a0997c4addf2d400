"""Document storage, cursor state, and undo history."""

from .document import Document, is_word_char
from .line_index import LineIndex, iter_lines
from .registers import RegisterBank, RegisterValue
from .state import CursorState, Selection
from .sync import BufferMirror, BufferSync
from .undo import Snapshot, UndoHistory
from .validation import clamp_offset, ensure_boundary

__all__ = [
    "Document",
    "CursorState",
    "Selection",
    "LineIndex",
    "iter_lines",
    "RegisterBank",
    "RegisterValue",
    "Snapshot",
    "UndoHistory",
    "BufferMirror",
    "BufferSync",
    "clamp_offset",
    "ensure_boundary",
    "is_word_char",
]
