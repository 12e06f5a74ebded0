"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (dissect an SDP payload or file)
- Resources: addressable data blobs (field table, sample SDP, report schema, files)
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m mcp_sdp_dissector.server.sdp_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_sdp_dissector.prompts.registry import register_prompts
from mcp_sdp_dissector.resources.registry import register_resources
from mcp_sdp_dissector.tools.dissect import dissect_sdp_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv("SDP_DISSECTOR_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("sdp-dissector", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
async def dissect_sdp(
    payload: str | None = None,
    path: str | None = None,
    encoding: str = "utf-8",
    include_offsets: bool = True,
    include_raw: bool = False,
) -> dict[str, Any]:
    """Classify each line of a session description.

    Parameters
    ----------
    payload:
        SDP text to dissect. Line terminators are kept as given (CRLF or LF).
    path:
        Path to a local .sdp/.txt file (optionally .gz) under SDP_DISSECTOR_BASE_DIR.
        Use either payload or path, not both.
    encoding:
        Encoding used to turn payload into bytes.
    include_offsets:
        Whether each record carries its byte offset and length.
    include_raw:
        Whether field and invalid-line records carry the raw line as hex.

    Returns
    -------
    dict:
        {"protocol": "SDP", "count": int, "malformed_count": int,
         "trailing_bytes": int, "records": list[dict], "summary": list[str]}
    """
    return await dissect_sdp_impl(
        payload=payload,
        path=path,
        encoding=encoding,
        include_offsets=include_offsets,
        include_raw=include_raw,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
