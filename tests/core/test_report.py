from __future__ import annotations

from mcp_sdp_dissector.core.dissector import dissect
from mcp_sdp_dissector.core.models import TrailingDataRecord
from mcp_sdp_dissector.core.report import (
    DissectionReport,
    build_report,
    record_to_dict,
    render_record,
)


def test_render_records() -> None:
    records = dissect(b"v=0\r\nxyz\r\ns=Title")
    assert [render_record(r) for r in records] == [
        "Session Description, version (v): 0",
        "Invalid line: xyz",
        "Data (7 bytes)",
    ]


def test_record_to_dict_field() -> None:
    (rec,) = dissect(b"m=audio 49170 RTP/AVP 0\r\n")
    assert record_to_dict(rec) == {
        "kind": "field",
        "line_no": 1,
        "offset": 0,
        "length": 25,
        "code": "m",
        "label": "Media Description, name and address",
        "section": "media",
        "value": "audio 49170 RTP/AVP 0",
    }


def test_record_to_dict_without_offsets_with_raw() -> None:
    (rec,) = dissect(b"xy\n")
    d = record_to_dict(rec, include_offsets=False, include_raw=True)
    assert d == {"kind": "malformed", "line_no": 1, "text": "xy", "raw": "7879"}


def test_record_to_dict_trailing() -> None:
    rec = TrailingDataRecord(offset=4, byte_count=3)
    assert record_to_dict(rec) == {"kind": "trailing", "offset": 4, "length": 3, "byte_count": 3}


def test_build_report_counts() -> None:
    records = dissect(b"v=0\r\nxyz\r\nqq\r\ns=Title")
    report = build_report(records)
    assert isinstance(report, DissectionReport)
    assert report.protocol == "SDP"
    assert report.count == 4
    assert report.malformed_count == 2
    assert report.trailing_bytes == 7
    assert report.summary[-1] == "Data (7 bytes)"


def test_report_schema_lists_records() -> None:
    schema = DissectionReport.model_json_schema()
    assert "records" in schema["properties"]
    assert "RecordModel" in schema["$defs"]
