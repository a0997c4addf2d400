"""Word lists and line rules the scanner highlights against."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable

import regex


def _unique_casefold(words: Iterable[str]) -> tuple[str, ...]:
    seen: Dict[str, None] = {}
    result: list[str] = []
    for word in words:
        cleaned = word.strip()
        key = cleaned.casefold()
        if cleaned and key not in seen:
            seen[key] = None
            result.append(cleaned)
    return tuple(result)


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Static description of one language's surface syntax.

    Matching is case-insensitive, so words differing only in case collapse to
    their first spelling.
    """

    name: str
    keywords: tuple[str, ...]
    types: tuple[str, ...]
    terminators: tuple[str, ...] = (";", "{", "}")
    function_definition: "regex.Pattern[str]" = field(
        default_factory=lambda: regex.compile(r"fn\b"), compare=False
    )

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("lexicon name cannot be empty")
        object.__setattr__(self, "keywords", _unique_casefold(self.keywords))
        object.__setattr__(self, "types", _unique_casefold(self.types))


class UnknownLexiconError(KeyError):
    """Raised when configuration names a lexicon that is not registered."""


RUST_LEXICON = Lexicon(
    name="rust",
    keywords=(
        "as", "break", "const", "continue", "crate", "else", "enum", "extern",
        "false", "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod",
        "move", "mut", "pub", "ref", "return", "self", "Self", "static", "struct",
        "super", "trait", "true", "type", "unsafe", "use", "where", "while",
        "async", "await", "dyn", "abstract", "become", "box", "do", "final",
        "macro", "override", "priv", "typeof", "unsized", "virtual", "yield",
    ),  # fmt: skip
    types=(
        "bool", "char", "f32", "f64", "i8", "i16", "i32", "i64", "i128", "isize",
        "u8", "u16", "u32", "u64", "u128", "usize", "str", "String", "Vec",
    ),  # fmt: skip
    function_definition=regex.compile(
        r"""(?:pub(?:\s*\([^)]*\))?\s+)?
            (?:(?:async|const|unsafe|extern(?:\s+"[^"]*")?)\s+)*
            fn\b""",
        regex.VERBOSE,
    ),
)

LEXICONS: Dict[str, Lexicon] = {RUST_LEXICON.name: RUST_LEXICON}


def register_lexicon(lexicon: Lexicon, *, replace: bool = False) -> Lexicon:
    if not replace and lexicon.name in LEXICONS:
        raise ValueError(f"Lexicon '{lexicon.name}' already registered")
    LEXICONS[lexicon.name] = lexicon
    return lexicon


def get_lexicon(name: str) -> Lexicon:
    try:
        return LEXICONS[name.strip().lower()]
    except KeyError as exc:
        raise UnknownLexiconError(
            f"Lexicon '{name}' is not registered; known: {sorted(LEXICONS)}"
        ) from exc


__all__ = [
    "LEXICONS",
    "Lexicon",
    "RUST_LEXICON",
    "UnknownLexiconError",
    "get_lexicon",
    "register_lexicon",
]
