"""Case-insensitive literal search used by find and replace.

A match that starts or ends inside a grapheme cluster is skipped, so
``"cafe"`` does not match the first four characters of ``"cafe\\u0301"``.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

import regex

from . import graphemes


def _pattern(needle: str, *, case_sensitive: bool) -> "regex.Pattern[str]":
    flags = 0 if case_sensitive else regex.IGNORECASE
    return regex.compile(regex.escape(needle), flags)


def _on_boundaries(text: str, start: int, end: int) -> bool:
    return (
        graphemes.snap_down(text, start) == start
        and graphemes.snap_up(text, end) == end
    )


def iter_matches(
    text: str, needle: str, *, start: int = 0, case_sensitive: bool = False
) -> Iterator[Tuple[int, int]]:
    """Yield non-overlapping ``(start, end)`` matches of ``needle``."""

    if not needle:
        return
    for match in _pattern(needle, case_sensitive=case_sensitive).finditer(text, start):
        if _on_boundaries(text, *match.span()):
            yield match.span()


def find_next(
    text: str, needle: str, start: int = 0, *, case_sensitive: bool = False
) -> Optional[Tuple[int, int]]:
    """First match at or after ``start``; no wrap-around."""

    return next(
        iter_matches(text, needle, start=start, case_sensitive=case_sensitive), None
    )


def replace_all(
    text: str, needle: str, replacement: str, *, case_sensitive: bool = False
) -> Tuple[str, int]:
    """Replace every match literally; returns ``(new_text, count)``."""

    pieces = []
    last = count = 0
    for start, end in iter_matches(text, needle, case_sensitive=case_sensitive):
        pieces.append(text[last:start])
        pieces.append(replacement)
        last = end
        count += 1
    if not count:
        return text, 0
    pieces.append(text[last:])
    return "".join(pieces), count


__all__ = ["find_next", "iter_matches", "replace_all"]
