"""Line-start index derived from document text."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Iterator, Optional

import regex

LINE_BREAK = regex.compile(r"\r\n|\r|\n")


def iter_lines(text: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` of each physical line, line break excluded."""

    start = 0
    for match in LINE_BREAK.finditer(text):
        yield start, match.start()
        start = match.end()
    yield start, len(text)


@dataclass(slots=True)
class LineIndex:
    """Ordered line starts for one text snapshot.

    ``starts`` is strictly increasing and always begins with ``0``. When the
    text ends with a line break the last entry equals ``len(text)`` and names
    an empty final line.
    """

    text_length: int = 0
    starts: tuple[int, ...] = field(default=(0,))
    _content_ends: tuple[int, ...] = field(default=(0,), repr=False)

    @classmethod
    def build(cls, text: str) -> "LineIndex":
        starts = [0]
        content_ends = []
        for match in LINE_BREAK.finditer(text):
            content_ends.append(match.start())
            starts.append(match.end())
        content_ends.append(len(text))
        return cls(
            text_length=len(text),
            starts=tuple(starts),
            _content_ends=tuple(content_ends),
        )

    def __len__(self) -> int:
        return len(self.starts)

    def line_at(self, offset: int) -> int:
        offset = max(0, min(offset, self.text_length))
        return bisect_right(self.starts, offset) - 1

    def line_range(
        self, index: int, *, include_break: bool = True
    ) -> Optional[tuple[int, int]]:
        if index < 0 or index >= len(self.starts):
            return None
        if not include_break:
            return self.starts[index], self._content_ends[index]
        if index + 1 < len(self.starts):
            return self.starts[index], self.starts[index + 1]
        return self.starts[index], self.text_length


__all__ = ["LINE_BREAK", "LineIndex", "iter_lines"]
