"""Highlight passes: keywords and types, string literals, comments.

Each pass works on the raw text independently of the others, so a ``//``
inside a string literal still opens a comment span and vice versa. Callers
apply spans in emission order and let later spans win.
"""

from __future__ import annotations

from typing import Iterable, List

import regex

from edit_engine.buffer import graphemes
from edit_engine.buffer.line_index import LINE_BREAK

from .models import Span, SpanKind

QUOTE = '"'


def _line_floor(text: str, index: int) -> int:
    return max(text.rfind("\n", 0, index), text.rfind("\r", 0, index)) + 1


def _starts_word(text: str, start: int) -> bool:
    """No alphanumeric cluster directly before ``start``."""

    floor = _line_floor(text, start)
    if start == floor:
        return True
    if graphemes.snap_down(text, start, floor=floor) != start:
        return False
    before = graphemes.previous_boundary(text, start, floor=floor)
    return not text[before].isalnum()


def _ends_word(text: str, end: int) -> bool:
    """``end`` closes a cluster and no alphanumeric cluster follows it."""

    if end >= len(text):
        return True
    if graphemes.snap_down(text, end, floor=_line_floor(text, end)) != end:
        return False
    return not text[end].isalnum()


def word_spans(text: str, words: Iterable[str], kind: SpanKind) -> List[Span]:
    """Case-insensitive whole-word occurrences of each word, in list order."""

    spans: List[Span] = []
    for word in words:
        pattern = regex.compile(regex.escape(word), regex.IGNORECASE)
        for match in pattern.finditer(text):
            start, end = match.span()
            if _starts_word(text, start) and _ends_word(text, end):
                spans.append(Span(kind, start, end))
    return spans


def is_escaped(text: str, index: int) -> bool:
    """True when an odd number of backslashes directly precede ``index``."""

    backslashes = 0
    position = index - 1
    while position >= 0 and text[position] == "\\":
        backslashes += 1
        position -= 1
    return backslashes % 2 == 1


def string_spans(text: str) -> List[Span]:
    """Spans over the contents of double-quoted literals, quotes excluded.

    An unterminated literal at the end of the text yields nothing.
    """

    spans: List[Span] = []
    opened_at: int | None = None
    position = text.find(QUOTE)
    while position != -1:
        if not is_escaped(text, position):
            if opened_at is None:
                opened_at = position
            else:
                spans.append(Span(SpanKind.STRING, opened_at + 1, position))
                opened_at = None
        position = text.find(QUOTE, position + 1)
    return spans


def line_comment_spans(text: str) -> List[Span]:
    spans: List[Span] = []
    position = text.find("//")
    while position != -1:
        line_break = LINE_BREAK.search(text, position)
        end = line_break.start() if line_break else len(text)
        spans.append(Span(SpanKind.COMMENT, position, end))
        position = text.find("//", end)
    return spans


def block_comment_spans(text: str) -> List[Span]:
    """``/* ... */`` regions closed by the nearest ``*/``; no nesting."""

    spans: List[Span] = []
    position = text.find("/*")
    while position != -1:
        close = text.find("*/", position + 2)
        if close == -1:
            break
        spans.append(Span(SpanKind.COMMENT, position, close + 2))
        position = text.find("/*", close + 2)
    return spans


__all__ = [
    "block_comment_spans",
    "is_escaped",
    "line_comment_spans",
    "string_spans",
    "word_spans",
]
