"""Module entrypoint.

Allows:
    python -m mcp_sdp_dissector
"""

from __future__ import annotations

from mcp_sdp_dissector.server.sdp_server import main

if __name__ == "__main__":
    main()
