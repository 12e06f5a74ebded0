"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import asyncio
import gzip
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_sdp_dissector.core.fields import FIELD_LABELS, MISPLACED, SECTION_LABELS, UNKNOWN
from mcp_sdp_dissector.core.paths import BASE_DIR_ENV, base_dir, safe_resolve
from mcp_sdp_dissector.core.report import DissectionReport

ALLOWED_FILE_SUFFIXES = {".sdp", ".txt"}
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "replace"

SAMPLE_SDP = (
    "v=0\r\n"
    "o=jdoe 2890844526 2890842807 IN IP4 10.47.16.5\r\n"
    "s=SDP Seminar\r\n"
    "i=A Seminar on the session description protocol\r\n"
    "u=http://www.example.com/seminars/sdp.pdf\r\n"
    "e=j.doe@example.com (Jane Doe)\r\n"
    "c=IN IP4 224.2.17.12/127\r\n"
    "t=2873397496 2873404696\r\n"
    "a=recvonly\r\n"
    "m=audio 49170 RTP/AVP 0\r\n"
    "m=video 51372 RTP/AVP 99\r\n"
    "a=rtpmap:99 h263-1998/90000\r\n"
)


def _allowed_suffix(path: Path) -> str:
    """Return the effective suffix for allowlist checks."""
    suffix = path.suffix.lower()
    if suffix == ".gz":
        suffix = path.with_suffix("").suffix.lower()
    return suffix


def _resolve_resource_path(path: str) -> Path:
    """Resolve and validate a resource file path."""
    resolved = safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    if _allowed_suffix(resolved) not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved


def _open_text(path: Path) -> str:
    """Read text from a file, supporting optional gzip compression."""
    if path.suffix.lower() == ".gz":
        with gzip.open(path, mode="rt", encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as f:
            return f.read()
    return path.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)


def field_table() -> dict[str, Any]:
    """Return the code-to-label table, section-dependent codes included."""
    table: dict[str, Any] = dict(FIELD_LABELS)
    for code, by_section in SECTION_LABELS.items():
        variants = {section.value: label for section, label in by_section.items()}
        variants["otherwise"] = MISPLACED
        table[code] = variants
    table["*"] = UNKNOWN
    return dict(sorted(table.items()))


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://sdp-dissector/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        return (
            "Resources:\n"
            "- app://sdp-dissector/help\n"
            "- app://sdp-dissector/fields\n"
            "- app://sdp-dissector/examples/sample-sdp\n"
            "- app://sdp-dissector/schemas/dissection-report\n"
            f"- file://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed}, .gz)\n"
            f"\nBase directory: {base_dir()}\n"
        )

    @mcp.resource("app://sdp-dissector/examples/sample-sdp")
    def sample_sdp() -> str:
        """Return a small session description for demos and tests."""
        return SAMPLE_SDP

    @mcp.resource("app://sdp-dissector/fields")
    def fields() -> dict[str, Any]:
        """Return the field code labels."""
        return field_table()

    @mcp.resource("app://sdp-dissector/schemas/dissection-report")
    def report_schema() -> dict[str, Any]:
        """Return the JSON schema for dissection reports."""
        return DissectionReport.model_json_schema()

    @mcp.resource("file://{path}")
    async def read_file(path: str) -> str:
        """Read a text file from within SDP_DISSECTOR_BASE_DIR."""
        p = _resolve_resource_path(path)
        return await asyncio.to_thread(_open_text, p)
