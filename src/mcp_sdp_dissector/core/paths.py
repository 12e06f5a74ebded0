"""Base-directory confinement for user supplied paths."""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR_ENV = "SDP_DISSECTOR_BASE_DIR"


def base_dir() -> Path:
    """Return the resolved base directory for file access."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def safe_resolve(path: str | Path) -> Path:
    """Resolve a path under the configured base directory."""
    base = base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p
