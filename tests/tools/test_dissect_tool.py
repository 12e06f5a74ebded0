from __future__ import annotations

import gzip
from pathlib import Path

import pytest

from mcp_sdp_dissector.tools.dissect import dissect_sdp_impl


@pytest.mark.asyncio
async def test_dissect_payload() -> None:
    out = await dissect_sdp_impl(payload="v=0\r\ni=hello\r\nxyz\r\ns=Title")

    assert out["protocol"] == "SDP"
    assert out["count"] == 4
    assert out["malformed_count"] == 1
    assert out["trailing_bytes"] == 7
    assert out["records"][1]["label"] == "Session Information"
    assert out["records"][1]["offset"] == 5
    assert "raw" not in out["records"][1]
    assert out["summary"][2] == "Invalid line: xyz"


@pytest.mark.asyncio
async def test_dissect_payload_without_offsets() -> None:
    out = await dissect_sdp_impl(payload="v=0\n", include_offsets=False, include_raw=True)
    rec = out["records"][0]
    assert "offset" not in rec
    assert rec["raw"] == "763d30"


@pytest.mark.asyncio
async def test_dissect_path_under_base_dir(base_dir: Path, write_sdp) -> None:
    write_sdp(base_dir / "call.sdp", [b"v=0", b"m=audio 0 RTP/AVP 0", b"a=sendrecv"])
    out = await dissect_sdp_impl(path="call.sdp")
    assert [r["label"] for r in out["records"]] == [
        "Session Description, version",
        "Media Description, name and address",
        "Media Attribute",
    ]


@pytest.mark.asyncio
async def test_dissect_gzip_path(base_dir: Path, sample_sdp: bytes) -> None:
    with gzip.open(base_dir / "call.sdp.gz", "wb") as f:
        f.write(sample_sdp)
    out = await dissect_sdp_impl(path=str(base_dir / "call.sdp.gz"))
    assert out["count"] == 10
    assert out["trailing_bytes"] == 0


@pytest.mark.asyncio
async def test_path_escaping_base_dir_rejected(base_dir: Path) -> None:
    with pytest.raises(ValueError, match="escapes"):
        await dissect_sdp_impl(path="../outside.sdp")


@pytest.mark.asyncio
async def test_missing_path(base_dir: Path) -> None:
    with pytest.raises(FileNotFoundError):
        await dissect_sdp_impl(path="nope.sdp")


@pytest.mark.asyncio
async def test_requires_exactly_one_source(base_dir: Path) -> None:
    with pytest.raises(ValueError, match="exactly one"):
        await dissect_sdp_impl()
    with pytest.raises(ValueError, match="exactly one"):
        await dissect_sdp_impl(payload="v=0\n", path="call.sdp")


@pytest.mark.asyncio
async def test_payload_size_cap() -> None:
    with pytest.raises(ValueError, match="exceeds"):
        await dissect_sdp_impl(payload="v=0\r\n" * 10, max_bytes=8)


@pytest.mark.asyncio
async def test_unknown_encoding() -> None:
    with pytest.raises(ValueError, match="Unknown encoding"):
        await dissect_sdp_impl(payload="v=0\n", encoding="no-such-codec")


@pytest.mark.asyncio
async def test_corrupt_gzip_path(base_dir: Path) -> None:
    (base_dir / "bad.sdp.gz").write_bytes(b"not gzip at all")
    with pytest.raises(ValueError, match="Invalid gzip payload"):
        await dissect_sdp_impl(path="bad.sdp.gz")
