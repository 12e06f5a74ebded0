"""Field classification for individual SDP lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .models import FieldRecord, MalformedLineRecord, Section
from .scanning import LineSpan
from .text import format_text

logger = logging.getLogger(__name__)

MIN_LINE_LENGTH = 2  # e.g. "v="
SEPARATOR = ord("=")

MISPLACED = "Misplaced"
UNKNOWN = "Unknown"

# Codes whose label never depends on the current section.
FIELD_LABELS: dict[str, str] = {
    "v": "Session Description, version",
    "o": "Owner/Creator, Session Id",
    "s": "Session Name",
    "u": "URI of Description",
    "e": "E-mail Address",
    "p": "Phone Number",
    "c": "Connection Information",
    "b": "Bandwidth Information",
    "t": "Time Description, active time",
    "r": "Repeat Time",
    "m": "Media Description, name and address",
    "k": "Encryption Key",
    "z": "Time Zone Adjustment",
}

# Overloaded codes: label by section, MISPLACED for any other section.
SECTION_LABELS: dict[str, dict[Section, str]] = {
    "i": {
        Section.SESSION: "Session Information",
        Section.MEDIA: "Media Title",
    },
    "a": {
        Section.SESSION: "Session Attribute",
        Section.MEDIA: "Media Attribute",
    },
}

SECTION_MARKERS: dict[str, Section] = {
    "v": Section.SESSION,
    "t": Section.TIME,
    "m": Section.MEDIA,
}


@dataclass(slots=True)
class SessionState:
    """Mutable context threaded through one parse."""

    section: Section = Section.NONE

    def observe(self, code: str) -> Section:
        """Switch section when `code` is a marker; return the current section."""
        marker = SECTION_MARKERS.get(code)
        if marker is not None:
            self.section = marker
        return self.section


def label_for(code: str, section: Section) -> str:
    """Return the descriptive label for `code` seen while in `section`."""
    by_section = SECTION_LABELS.get(code)
    if by_section is not None:
        return by_section.get(section, MISPLACED)
    return FIELD_LABELS.get(code, UNKNOWN)


def classify(
    buffer: bytes,
    span: LineSpan,
    state: SessionState,
    *,
    line_no: int = 1,
) -> FieldRecord | MalformedLineRecord:
    """Classify one line, updating `state` when the line opens a section."""
    if span.length < MIN_LINE_LENGTH:
        return MalformedLineRecord(
            line_no=line_no,
            offset=span.start,
            length=span.consumed,
            raw=b"",
            text="",
        )

    line = span.bytes_of(buffer)
    if line[1] != SEPARATOR:
        text = format_text(line)
        logger.debug("line %d: invalid line %r", line_no, text)
        return MalformedLineRecord(
            line_no=line_no,
            offset=span.start,
            length=span.consumed,
            raw=line,
            text=text,
        )

    code = chr(line[0])
    value = line[2:]
    section = state.observe(code)
    return FieldRecord(
        line_no=line_no,
        offset=span.start,
        length=span.consumed,
        code=code,
        value=value,
        value_text=format_text(value),
        label=label_for(code, section),
        section=section,
    )
