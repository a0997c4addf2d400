"""Extended grapheme cluster boundaries over Python strings.

Offsets are ``str`` indices. ``regex``'s ``\\X`` implements the Unicode
extended grapheme cluster rules, so ``"e\\u0301"`` and ``"\\r\\n"`` are one
cluster each.
"""

from __future__ import annotations

from typing import Iterator, List

import regex

_CLUSTER = regex.compile(r"\X")


def iter_clusters(
    text: str, start: int = 0, end: int | None = None
) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` of every cluster in ``text[start:end]``.

    ``start`` must already be a cluster boundary.
    """

    stop = len(text) if end is None else end
    for match in _CLUSTER.finditer(text, start, stop):
        yield match.span()


def boundaries(text: str) -> List[int]:
    """All cluster boundaries of ``text``, including ``0`` and ``len(text)``."""

    result = [begin for begin, _ in iter_clusters(text)]
    result.append(len(text))
    return result


def next_boundary(text: str, offset: int) -> int:
    """First boundary strictly after ``offset`` (``len(text)`` at the end)."""

    if offset >= len(text):
        return len(text)
    match = _CLUSTER.match(text, offset)
    return match.end() if match else len(text)


def previous_boundary(text: str, offset: int, *, floor: int = 0) -> int:
    """Last boundary strictly before ``offset``; ``floor`` must be a boundary."""

    if offset <= floor:
        return floor
    last = floor
    for begin, _ in iter_clusters(text, floor, offset):
        last = begin
    return last


def snap_down(text: str, offset: int, *, floor: int = 0) -> int:
    """Greatest boundary ``<= offset``."""

    if offset >= len(text):
        return len(text)
    if offset <= floor:
        return floor
    for begin, end in iter_clusters(text, floor):
        if end > offset:
            return begin
    return len(text)


def snap_up(text: str, offset: int, *, floor: int = 0) -> int:
    """Smallest boundary ``>= offset``."""

    if offset >= len(text):
        return len(text)
    if offset <= floor:
        return floor
    for begin, end in iter_clusters(text, floor):
        if begin >= offset:
            return begin
        if end >= offset:
            return end
    return len(text)


def count(text: str, start: int, end: int) -> int:
    """Number of clusters between two boundaries."""

    if end <= start:
        return 0
    return sum(1 for _ in iter_clusters(text, start, end))


def advance(text: str, start: int, clusters: int, *, limit: int | None = None) -> int:
    """Offset reached after stepping ``clusters`` clusters from ``start``.

    Stops early at ``limit`` (default: end of text).
    """

    stop = len(text) if limit is None else limit
    position = start
    for step, (_, end) in enumerate(iter_clusters(text, start, stop)):
        if step >= clusters:
            break
        position = end
    return position


def retreat(text: str, start: int, clusters: int, *, floor: int = 0) -> int:
    """Offset reached after stepping ``clusters`` clusters back from ``start``."""

    if clusters <= 0:
        return start
    if start <= floor:
        return floor
    starts = [begin for begin, _ in iter_clusters(text, floor, start)]
    if clusters > len(starts):
        return floor
    return starts[-clusters]


__all__ = [
    "advance",
    "boundaries",
    "count",
    "iter_clusters",
    "next_boundary",
    "previous_boundary",
    "retreat",
    "snap_down",
    "snap_up",
]
