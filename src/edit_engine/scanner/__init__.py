"""Lexical scanner deriving highlight and diagnostic spans from plain text."""

from .lexicon import LEXICONS, RUST_LEXICON, Lexicon, UnknownLexiconError, get_lexicon
from .models import Span, SpanKind
from .scan import scan

__all__ = [
    "LEXICONS",
    "Lexicon",
    "RUST_LEXICON",
    "Span",
    "SpanKind",
    "UnknownLexiconError",
    "get_lexicon",
    "scan",
]
