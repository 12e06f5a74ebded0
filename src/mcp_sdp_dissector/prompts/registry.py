"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def summarize_resource(uri: str) -> list[dict[str, Any]]:
        """Build a prompt that summarizes a resource URI."""
        return [
            {
                "role": "system",
                "content": (
                    "You are a precise assistant. Summarize the provided resource clearly and "
                    "concisely. Extract key points and anything that looks malformed."
                ),
            },
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "Summarize this resource:"},
                    {"type": "resource", "uri": uri},
                ],
            },
        ]

    @mcp.prompt()
    def explain_session_description(
        path: str,
        include_raw: bool = False,
    ) -> list[dict[str, Any]]:
        """Build a prompt that walks through an SDP file field by field."""
        raw_flag = "true" if include_raw else "false"
        return [
            {
                "role": "system",
                "content": (
                    "You are a VoIP and streaming protocol assistant. Explain session "
                    "descriptions using only the dissector output. Do not invent fields."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Explain the session description using dissect_sdp. Follow this workflow:\n"
                    "- Always call dissect_sdp first with the parameters below.\n"
                    "- Group fields by section (session, time, media) in the order they appear.\n"
                    "- Call out every 'Misplaced' or 'Unknown' label and every invalid line, "
                    "quoting line_no and the summary line.\n"
                    "- If trailing_bytes is non-zero, say how many bytes were not parsed "
                    "as lines and suggest a missing final line terminator or an empty line "
                    "as the likely cause.\n\n"
                    "Call dissect_sdp with:\n"
                    f"- path: {path}\n"
                    f"- include_raw: {raw_flag}\n\n"
                    "Return this structure:\n"
                    "1) Session overview (name, origin, connection)\n"
                    "2) Media streams (one bullet per m= line with its attributes)\n"
                    "3) Problems found (or 'None')\n"
                ),
            },
            {
                "role": "user",
                "content": [
                    {
                        "type": "text",
                        "text": "Optional: the field label table is available at:",
                    },
                    {"type": "resource", "uri": "app://sdp-dissector/fields"},
                ],
            },
        ]
