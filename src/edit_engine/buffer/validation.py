"""Clamping helpers that keep offsets inside the text and on cluster boundaries."""

from __future__ import annotations

from typing import Literal

from . import graphemes

Rounding = Literal["down", "up"]


def clamp_offset(text: str, offset: int) -> int:
    return max(0, min(int(offset), len(text)))


def ensure_boundary(
    text: str, offset: int, *, rounding: Rounding = "down", floor: int = 0
) -> int:
    """Clamp ``offset`` and move it onto the nearest cluster boundary.

    ``rounding`` picks the side when the offset falls inside a cluster.
    ``floor`` is a known boundary at or before ``offset`` (a line start) that
    segmentation may begin from.
    """

    offset = clamp_offset(text, offset)
    floor = min(max(0, floor), offset)
    if rounding == "up":
        return graphemes.snap_up(text, offset, floor=floor)
    return graphemes.snap_down(text, offset, floor=floor)


def ordered_range(text: str, start: int, end: int) -> tuple[int, int]:
    """Return ``(lower, upper)`` boundaries covering ``start``..``end``."""

    lower, upper = sorted((clamp_offset(text, start), clamp_offset(text, end)))
    return (
        graphemes.snap_down(text, lower),
        graphemes.snap_up(text, upper),
    )


__all__ = ["Rounding", "clamp_offset", "ensure_boundary", "ordered_range"]
