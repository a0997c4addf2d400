"""Callbacks a host UI registers to receive session updates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from edit_engine.buffer import BufferMirror
from edit_engine.scanner import Span


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class SessionHooks:
    """Invoked after every session command; only ``update_buffer`` is required."""

    update_buffer: Callable[[BufferMirror], None]
    update_spans: Callable[[Sequence[Span]], None] = _noop
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


__all__ = ["SessionHooks"]
