"""Dissection driver and payload loading.

This module is the main integration point: it walks a payload line by line,
classifies each line and hands one record per line to a sink, followed by
at most one trailing-data record.
"""

from __future__ import annotations

import gzip
import logging
import os
import zlib
from collections.abc import Iterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

import aiofiles
from aiofiles.threadpool import wrap

from .fields import MIN_LINE_LENGTH, SessionState, classify
from .models import SdpRecord, TrailingDataRecord
from .scanning import iter_lines

logger = logging.getLogger(__name__)

MAX_BYTES_ENV = "SDP_DISSECTOR_MAX_BYTES"
DEFAULT_MAX_BYTES = 1024 * 1024


class RecordSink(Protocol):
    """Receives records in buffer order; never read back by the dissector."""

    def emit(self, record: SdpRecord) -> None:
        ...


@dataclass(slots=True)
class ListSink:
    """Sink that keeps every record in a list."""

    records: list[SdpRecord] = field(default_factory=list)

    def emit(self, record: SdpRecord) -> None:
        self.records.append(record)


def _as_bytes(payload: bytes | bytearray | memoryview) -> bytes:
    if isinstance(payload, bytes):
        return payload
    if isinstance(payload, (bytearray, memoryview)):
        return bytes(payload)
    raise TypeError(f"payload must be bytes-like, got {type(payload).__name__}")


def iter_records(payload: bytes | bytearray | memoryview) -> Iterator[SdpRecord]:
    """Yield records for `payload` in buffer order.

    Scanning stops at the first line shorter than two bytes or when no
    terminator remains; whatever is left is reported as one trailing-data
    record.
    """
    buf = _as_bytes(payload)
    state = SessionState()
    offset = 0

    for line_no, span in enumerate(iter_lines(buf), start=1):
        if span.length < MIN_LINE_LENGTH:
            logger.debug("line %d: shorter than %d bytes, stopping", line_no, MIN_LINE_LENGTH)
            break
        yield classify(buf, span, state, line_no=line_no)
        offset = span.next_offset

    remaining = len(buf) - offset
    if remaining > 0:
        logger.debug("trailing data: %d bytes at offset %d", remaining, offset)
        yield TrailingDataRecord(offset=offset, byte_count=remaining)


def parse(payload: bytes | bytearray | memoryview, sink: RecordSink) -> None:
    """Dissect `payload`, emitting every record to `sink`."""
    for record in iter_records(payload):
        sink.emit(record)


def dissect(payload: bytes | bytearray | memoryview) -> list[SdpRecord]:
    """Collect the records for `payload` into a list."""
    sink = ListSink()
    parse(payload, sink)
    return sink.records


def resolve_max_bytes(max_bytes: int | None = None) -> int:
    """Return the payload size cap (argument, then env, then default)."""
    if max_bytes is not None:
        if max_bytes < 1:
            raise ValueError("max_bytes must be >= 1")
        return max_bytes

    env = os.getenv(MAX_BYTES_ENV)
    if env:
        try:
            value = int(env)
        except ValueError as exc:
            raise ValueError(f"{MAX_BYTES_ENV} must be an integer") from exc
        if value < 1:
            raise ValueError(f"{MAX_BYTES_ENV} must be >= 1")
        return value

    return DEFAULT_MAX_BYTES


@asynccontextmanager
async def _open_binary(path: Path):
    """Open a payload file for async binary reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rb")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, mode="rb") as f:
            yield f


async def load_payload(path: str | Path, *, max_bytes: int | None = None) -> bytes:
    """Read a payload file, rejecting anything larger than the size cap."""
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Payload file not found: {p}")

    limit = resolve_max_bytes(max_bytes)
    try:
        async with _open_binary(p) as f:
            data = await f.read(limit + 1)
    except (gzip.BadGzipFile, EOFError, zlib.error) as exc:
        raise ValueError(f"Invalid gzip payload: {p}") from exc

    if len(data) > limit:
        raise ValueError(f"Payload exceeds {limit} bytes: {p}")
    return data


async def dissect_file(path: str | Path, *, max_bytes: int | None = None) -> list[SdpRecord]:
    """Load a payload file and dissect it."""
    payload = await load_payload(path, max_bytes=max_bytes)
    return dissect(payload)
