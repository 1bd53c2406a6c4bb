from __future__ import annotations
import os
import sys
from .server import mcp
from .utils.logging import setup_logging
import logging

def main() -> None:
    """
    Run the notation tools as an MCP server.

    Examples:
      MCP_TRANSPORT=streamable-http KROKI_URL=http://localhost:8000 python -m mermaid_notation
      MCP_TRANSPORT=stdio           python -m mermaid_notation
    """
    setup_logging()
    log = logging.getLogger("mermaid.notation.main")

    if any(a in ("-h", "--help") for a in sys.argv[1:]):
        sys.stderr.write("mermaid-notation: serializes, validates and renders Mermaid diagrams over MCP.\n")
        sys.stderr.flush()
        return

    transport = os.getenv("MCP_TRANSPORT", "streamable-http").strip().lower()

    host = os.getenv("MCP_HOST", "0.0.0.0")
    port = int(os.getenv("MCP_PORT", "8001"))
    mcp.settings.host = host
    mcp.settings.port = port

    if transport == "streamable-http":
        mcp.settings.streamable_http_path = os.getenv("MCP_MOUNT_PATH", "/mcp")
    elif transport == "sse":
        mcp.settings.sse_path = os.getenv("MCP_SSE_PATH", "/sse")

    if os.getenv("MCP_STATELESS_JSON", "").lower() in {"1", "true", "yes"}:
        mcp.settings.stateless_http = True
        mcp.settings.json_response = True

    log.info(
        "server.start",
        extra={
            "transport": transport,
            "host": host,
            "port": port,
            "path": getattr(mcp.settings, "streamable_http_path", None) or getattr(mcp.settings, "sse_path", None),
        },
    )

    mcp.run(transport=transport)

if __name__ == "__main__":
    main()
