from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from mcp_sdp_dissector.core.dissector import dissect, load_payload, resolve_max_bytes
from mcp_sdp_dissector.core.models import PROTOCOL_NAME
from mcp_sdp_dissector.core.report import build_report, render_record


def _read_payload(source: str, max_bytes: int | None) -> bytes:
    if source == "-":
        limit = resolve_max_bytes(max_bytes)
        data = sys.stdin.buffer.read(limit + 1)
        if len(data) > limit:
            raise ValueError(f"Payload exceeds {limit} bytes: <stdin>")
        return data
    return asyncio.run(load_payload(Path(source), max_bytes=max_bytes))


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Dissect an SDP payload line by line.")
    p.add_argument("path", help="SDP file (.gz accepted) or '-' for stdin")
    p.add_argument("--json", dest="as_json", action="store_true", help="Print the report as JSON")
    p.add_argument("--offsets", action="store_true", help="Prefix each line with offset+length")
    p.add_argument("--raw", dest="include_raw", action="store_true", help="Include raw lines (hex) in JSON output")
    p.add_argument("--max-bytes", type=int, default=None, help="Reject payloads larger than this")

    args = p.parse_args(argv)

    try:
        payload = _read_payload(args.path, args.max_bytes)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    records = dissect(payload)

    if args.as_json:
        report = build_report(records, include_offsets=args.offsets, include_raw=args.include_raw)
        print(json.dumps(report.model_dump(exclude_none=True), indent=2))
        return

    print(PROTOCOL_NAME)
    for r in records:
        line = render_record(r)
        if args.offsets:
            line = f"{r.offset}+{r.length} {line}"
        print(f"    {line}")


if __name__ == "__main__":
    main()
