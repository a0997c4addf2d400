"""Heuristic diagnostics layered as error spans.

Neither check parses the language. Bracket balance is tracked per bracket
kind, so ``(]`` is only reported through the kinds' own imbalance. The
terminator check flags valid multi-line expressions and attribute lines too.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from edit_engine.buffer.line_index import iter_lines

from .highlight import QUOTE, is_escaped
from .lexicon import Lexicon
from .models import Span, SpanKind

BRACKET_PAIRS: Sequence[Tuple[str, str]] = (("(", ")"), ("{", "}"), ("[", "]"))
COMMENT_MARKERS = ("//", "/*", "*/")


def bracket_spans(
    text: str, pairs: Sequence[Tuple[str, str]] = BRACKET_PAIRS
) -> List[Span]:
    """One-character error spans for unmatched brackets of each kind.

    Per kind: stray closers in text order, then unclosed openers.
    """

    spans: List[Span] = []
    for opener, closer in pairs:
        stack: List[int] = []
        for index, char in enumerate(text):
            if char == opener:
                stack.append(index)
            elif char == closer:
                if stack:
                    stack.pop()
                else:
                    spans.append(Span(SpanKind.ERROR, index, index + 1))
        spans.extend(Span(SpanKind.ERROR, index, index + 1) for index in stack)
    return spans


def has_open_string(line: str) -> bool:
    quotes = sum(
        1
        for index, char in enumerate(line)
        if char == QUOTE and not is_escaped(line, index)
    )
    return quotes % 2 == 1


def looks_like_comment_or_string(line: str) -> bool:
    stripped = line.lstrip()
    return (
        any(marker in line for marker in COMMENT_MARKERS)
        or stripped.startswith("*")
        or has_open_string(line)
    )


def needs_terminator(line: str, lexicon: Lexicon) -> bool:
    trimmed = line.strip()
    if not trimmed:
        return False
    if trimmed.endswith(lexicon.terminators):
        return False
    if trimmed.startswith("//"):
        return False
    if lexicon.function_definition.match(trimmed):
        return False
    if "->" in trimmed:
        return False
    return not looks_like_comment_or_string(line)


def terminator_spans(text: str, lexicon: Lexicon) -> List[Span]:
    """Full-line error spans for lines that seem to miss a statement terminator."""

    return [
        Span(SpanKind.ERROR, start, end)
        for start, end in iter_lines(text)
        if needs_terminator(text[start:end], lexicon)
    ]


__all__ = [
    "BRACKET_PAIRS",
    "bracket_spans",
    "has_open_string",
    "looks_like_comment_or_string",
    "needs_terminator",
    "terminator_spans",
]
