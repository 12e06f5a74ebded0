"""Rendering of dissection records.

Two views of the same records: one-line text summaries for people, and
pydantic models for JSON consumers.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal

from pydantic import BaseModel, Field

from .models import (
    PROTOCOL_SHORT_NAME,
    FieldRecord,
    MalformedLineRecord,
    SdpRecord,
    TrailingDataRecord,
)


class RecordModel(BaseModel):
    kind: Literal["field", "malformed", "trailing"] = Field(description="Record type.")
    line_no: int | None = Field(default=None, description="1-based line number (not set for trailing data).")
    offset: int | None = Field(default=None, description="Byte offset of the record in the payload.")
    length: int | None = Field(default=None, description="Bytes accounted for, terminator included.")
    code: str | None = Field(default=None, description="One-character field code.")
    label: str | None = Field(default=None, description="Descriptive field label.")
    section: str | None = Field(default=None, description="Section current when the line was read.")
    value: str | None = Field(default=None, description="Field value, escaped for display.")
    text: str | None = Field(default=None, description="Invalid line text, escaped for display.")
    byte_count: int | None = Field(default=None, description="Trailing data size in bytes.")
    raw: str | None = Field(default=None, description="Raw line bytes as hex.")


class DissectionReport(BaseModel):
    protocol: str = PROTOCOL_SHORT_NAME
    count: int = Field(description="Number of records, trailing data included.")
    malformed_count: int = 0
    trailing_bytes: int = 0
    records: list[RecordModel] = Field(default_factory=list)
    summary: list[str] = Field(default_factory=list)


def render_record(record: SdpRecord) -> str:
    """Return the one-line summary for a record."""
    if isinstance(record, FieldRecord):
        return f"{record.label} ({record.code}): {record.value_text}"
    if isinstance(record, MalformedLineRecord):
        return f"Invalid line: {record.text}"
    if isinstance(record, TrailingDataRecord):
        return f"Data ({record.byte_count} bytes)"
    raise TypeError(f"not an SDP record: {record!r}")


def record_to_model(
    record: SdpRecord,
    *,
    include_offsets: bool = True,
    include_raw: bool = False,
) -> RecordModel:
    """Convert a record into its JSON model."""
    if isinstance(record, FieldRecord):
        out = RecordModel(
            kind="field",
            line_no=record.line_no,
            code=record.code,
            label=record.label,
            section=record.section.value,
            value=record.value_text,
        )
        if include_raw:
            out.raw = (record.code.encode("latin-1") + b"=" + record.value).hex()
    elif isinstance(record, MalformedLineRecord):
        out = RecordModel(kind="malformed", line_no=record.line_no, text=record.text)
        if include_raw:
            out.raw = record.raw.hex()
    elif isinstance(record, TrailingDataRecord):
        out = RecordModel(kind="trailing", byte_count=record.byte_count)
    else:
        raise TypeError(f"not an SDP record: {record!r}")

    if include_offsets:
        out.offset = record.offset
        out.length = record.length
    return out


def record_to_dict(record: SdpRecord, **kwargs: Any) -> dict[str, Any]:
    """Convert a record into a JSON-serializable dict, unset keys dropped."""
    return record_to_model(record, **kwargs).model_dump(exclude_none=True)


def build_report(
    records: Sequence[SdpRecord],
    *,
    include_offsets: bool = True,
    include_raw: bool = False,
) -> DissectionReport:
    """Summarize a full dissection."""
    malformed = sum(1 for r in records if isinstance(r, MalformedLineRecord))
    trailing = sum(r.byte_count for r in records if isinstance(r, TrailingDataRecord))
    return DissectionReport(
        count=len(records),
        malformed_count=malformed,
        trailing_bytes=trailing,
        records=[
            record_to_model(r, include_offsets=include_offsets, include_raw=include_raw)
            for r in records
        ],
        summary=[render_record(r) for r in records],
    )
