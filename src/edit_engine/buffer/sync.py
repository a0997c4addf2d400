"""Adapter boundary types for syncing documents with host widgets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from .state import Selection


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of the document a widget should display.

    ``line`` and ``column`` are zero-based; ``column`` counts grapheme clusters.
    """

    text: str
    cursor: int
    selection: Optional[Selection]
    line: int = 0
    column: int = 0
    version: int = 0
    modified: bool = False
    attributes: dict[str, str] = field(default_factory=dict)


class BufferSync(Protocol):
    """How hosts exchange state with the single authoritative document."""

    def pull_buffer(self) -> BufferMirror:
        """Return the latest snapshot the host should render."""
        ...

    def push_host_edit(self, mirror: BufferMirror) -> None:
        """Submit a host-originated change (IME commit, drag-and-drop) as one edit."""
        ...


__all__ = ["BufferMirror", "BufferSync"]
