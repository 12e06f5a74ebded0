"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import codecs
from typing import Any

from mcp_sdp_dissector.core.dissector import dissect, load_payload, resolve_max_bytes
from mcp_sdp_dissector.core.paths import safe_resolve
from mcp_sdp_dissector.core.report import build_report


def _encode_payload(payload: str, encoding: str) -> bytes:
    """Encode a text payload, rejecting unknown encodings up front."""
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ValueError(f"Unknown encoding '{encoding}'.") from e
    return payload.encode(encoding, errors="strict")


async def dissect_sdp_impl(
    *,
    payload: str | None = None,
    path: str | None = None,
    encoding: str = "utf-8",
    include_offsets: bool = True,
    include_raw: bool = False,
    max_bytes: int | None = None,
) -> dict[str, Any]:
    """Implementation for the `dissect_sdp` MCP tool.

    Notes
    -----
    - Exactly one of payload/path must be given.
    - path is resolved under SDP_DISSECTOR_BASE_DIR; .gz files are decompressed.
    - Payloads above the size cap are rejected rather than truncated.
    """
    if (payload is None) == (path is None):
        raise ValueError("Provide exactly one of payload or path.")

    limit = resolve_max_bytes(max_bytes)
    if payload is not None:
        data = _encode_payload(payload, encoding)
        if len(data) > limit:
            raise ValueError(f"Payload exceeds {limit} bytes")
    else:
        data = await load_payload(safe_resolve(path), max_bytes=limit)

    records = dissect(data)
    report = build_report(records, include_offsets=include_offsets, include_raw=include_raw)
    out = report.model_dump()
    out["records"] = [r.model_dump(exclude_none=True) for r in report.records]
    return out
