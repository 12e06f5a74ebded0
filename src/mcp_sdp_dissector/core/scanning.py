"""Line scanning over an in-memory payload.

Only `LF` and `CRLF` end a line. A bare `CR` is ordinary content, and bytes
after the last `LF` are never returned as a line: they are left to the
caller's trailing-data accounting.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_LF = 0x0A
_CR = 0x0D


@dataclass(frozen=True, slots=True)
class LineSpan:
    """A view `(start, length)` into the payload, terminator excluded."""

    start: int
    length: int
    next_offset: int  # first byte after the terminator

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def consumed(self) -> int:
        """Bytes covered by the line and its terminator."""
        return self.next_offset - self.start

    def bytes_of(self, buffer: bytes) -> bytes:
        return buffer[self.start : self.end]


def next_line(buffer: bytes, offset: int) -> LineSpan | None:
    """Return the line starting at `offset`, or None when no terminator remains."""
    if offset < 0 or offset > len(buffer):
        raise ValueError(f"offset {offset} outside buffer of {len(buffer)} bytes")

    lf = buffer.find(b"\n", offset)
    if lf < 0:
        return None

    end = lf
    if end > offset and buffer[end - 1] == _CR:
        end -= 1
    return LineSpan(start=offset, length=end - offset, next_offset=lf + 1)


def iter_lines(buffer: bytes, offset: int = 0) -> Iterator[LineSpan]:
    """Yield successive terminated lines from `offset` until none remain."""
    while offset < len(buffer):
        span = next_line(buffer, offset)
        if span is None:
            return
        yield span
        offset = span.next_offset
