from __future__ import annotations

from typing import Iterable

from edit_engine.buffer import Document, graphemes

COMBINING_E = "e\u0301"
FLAG_FR = "\U0001F1EB\U0001F1F7"


def make_document(text: str, *, cursor: int = 0) -> Document:
    document = Document(text)
    document.move_cursor(cursor)
    return document


def assert_on_boundaries(document: Document) -> None:
    bounds = set(graphemes.boundaries(document.text))
    assert document.cursor_position in bounds
    if document.selection is not None:
        assert document.selection.start in bounds
        assert document.selection.end in bounds


def assert_line_index_consistent(document: Document, offsets: Iterable[int]) -> None:
    starts = document.line_starts
    assert starts[0] == 0
    assert list(starts) == sorted(set(starts))
    assert starts[-1] <= len(document.text)
    count = document.line_count()
    for offset in offsets:
        index = document.line_at_offset(offset)
        assert starts[index] <= offset
        assert index + 1 == count or offset < starts[index + 1]
