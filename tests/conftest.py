from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_LINES = [
    b"v=0",
    b"o=jdoe 2890844526 2890842807 IN IP4 10.47.16.5",
    b"s=SDP Seminar",
    b"i=A Seminar on the session description protocol",
    b"c=IN IP4 224.2.17.12/127",
    b"t=2873397496 2873404696",
    b"a=recvonly",
    b"m=audio 49170 RTP/AVP 0",
    b"i=Main audio",
    b"a=rtpmap:0 PCMU/8000",
]


@pytest.fixture
def sample_sdp() -> bytes:
    return b"".join(line + b"\r\n" for line in SAMPLE_LINES)


@pytest.fixture
def write_sdp() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\r\n" for line in lines))

    return _write


@pytest.fixture
def base_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("SDP_DISSECTOR_BASE_DIR", str(tmp_path))
    return tmp_path
