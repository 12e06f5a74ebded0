"""Display helpers for raw payload bytes."""

from __future__ import annotations

_NAMED_ESCAPES = {
    0x07: "\\a",
    0x08: "\\b",
    0x09: "\\t",
    0x0A: "\\n",
    0x0B: "\\v",
    0x0C: "\\f",
    0x0D: "\\r",
}


def format_text(data: bytes) -> str:
    """Render bytes as printable ASCII, escaping everything else."""
    out: list[str] = []
    for b in data:
        if 0x20 <= b < 0x7F:
            out.append(chr(b))
        elif b in _NAMED_ESCAPES:
            out.append(_NAMED_ESCAPES[b])
        else:
            out.append(f"\\{b:03o}")
    return "".join(out)
