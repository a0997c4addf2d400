"""Span types produced by the lexical scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SpanKind(str, Enum):
    """Paint instruction categories, in the order the scanner emits them."""

    KEYWORD = "keyword"
    TYPE = "type"
    STRING = "string"
    COMMENT = "comment"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` range over one text snapshot."""

    kind: SpanKind
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span range {self.start}..{self.end}")

    def slice(self, text: str) -> str:
        return text[self.start : self.end]

    def byte_range(self, text: str) -> tuple[int, int]:
        """The same range expressed as UTF-8 byte offsets into ``text``."""

        start = len(text[: self.start].encode("utf-8"))
        return start, start + len(text[self.start : self.end].encode("utf-8"))


__all__ = ["Span", "SpanKind"]
