from __future__ import annotations

from pathlib import Path

import pytest

from mcp_sdp_dissector.core.dissector import dissect
from mcp_sdp_dissector.core.models import FieldRecord
from mcp_sdp_dissector.resources.registry import (
    SAMPLE_SDP,
    _open_text,
    _resolve_resource_path,
    field_table,
)


def test_field_table() -> None:
    table = field_table()
    assert table["v"] == "Session Description, version"
    assert table["i"] == {
        "session": "Session Information",
        "media": "Media Title",
        "otherwise": "Misplaced",
    }
    assert table["*"] == "Unknown"


def test_sample_sdp_is_clean() -> None:
    records = dissect(SAMPLE_SDP.encode("ascii"))
    assert all(isinstance(r, FieldRecord) for r in records)
    assert records[-1].label == "Media Attribute"


def test_resolve_allows_sdp(base_dir: Path, write_sdp) -> None:
    write_sdp(base_dir / "call.sdp", [b"v=0"])
    p = _resolve_resource_path("call.sdp")
    assert _open_text(p).splitlines() == ["v=0"]


def test_resolve_rejects_suffix(base_dir: Path) -> None:
    (base_dir / "call.bin").write_bytes(b"v=0\r\n")
    with pytest.raises(ValueError, match="not allowed"):
        _resolve_resource_path("call.bin")


def test_resolve_rejects_escape(base_dir: Path) -> None:
    with pytest.raises(ValueError, match="escapes"):
        _resolve_resource_path("../x.sdp")
