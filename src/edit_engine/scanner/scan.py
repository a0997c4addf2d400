"""Single entry point deriving every highlight and diagnostic span."""

from __future__ import annotations

from typing import List, Optional, Union

from edit_engine.runtime.telemetry import span

from .diagnostics import bracket_spans, terminator_spans
from .highlight import (
    block_comment_spans,
    line_comment_spans,
    string_spans,
    word_spans,
)
from .lexicon import RUST_LEXICON, Lexicon, get_lexicon
from .models import Span, SpanKind


def scan(text: str, lexicon: Optional[Union[Lexicon, str]] = None) -> List[Span]:
    """Return all spans for ``text`` in paint order.

    Order: keywords, types, strings, line comments, block comments, bracket
    errors, terminator errors. Stateless; safe to call from any thread on an
    immutable snapshot.
    """

    if isinstance(lexicon, str):
        lexicon = get_lexicon(lexicon)
    elif lexicon is None:
        lexicon = RUST_LEXICON

    with span(
        "scanner::scan",
        logger_name="edit_engine.scanner",
        metadata={"lexicon": lexicon.name, "chars": len(text)},
    ) as handle:
        spans: List[Span] = []
        spans.extend(word_spans(text, lexicon.keywords, SpanKind.KEYWORD))
        spans.extend(word_spans(text, lexicon.types, SpanKind.TYPE))
        spans.extend(string_spans(text))
        spans.extend(line_comment_spans(text))
        spans.extend(block_comment_spans(text))
        spans.extend(bracket_spans(text))
        spans.extend(terminator_spans(text, lexicon))
        handle.add_metadata("spans", len(spans))
        return spans


__all__ = ["scan"]
