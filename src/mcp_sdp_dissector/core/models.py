"""Core data models for SDP dissection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

PROTOCOL_NAME = "Session Description Protocol"
PROTOCOL_SHORT_NAME = "SDP"
PROTOCOL_FILTER_NAME = "sdp"


class Section(str, Enum):
    """Coarse parsing context opened by the most recent v=, t= or m= line."""

    NONE = "none"
    SESSION = "session"
    TIME = "time"
    MEDIA = "media"


@dataclass(frozen=True, slots=True)
class FieldRecord:
    """One well-framed `<code>=<value>` line."""

    line_no: int
    offset: int
    length: int  # line plus terminator
    code: str
    value: bytes
    value_text: str  # value after format_text, safe to display
    label: str
    section: Section


@dataclass(frozen=True, slots=True)
class MalformedLineRecord:
    """A line without `=` in the second position."""

    line_no: int
    offset: int
    length: int
    raw: bytes
    text: str


@dataclass(frozen=True, slots=True)
class TrailingDataRecord:
    """Bytes left over once line scanning stops (count only, never decoded)."""

    offset: int
    byte_count: int

    @property
    def length(self) -> int:
        return self.byte_count


SdpRecord = Union[FieldRecord, MalformedLineRecord, TrailingDataRecord]
