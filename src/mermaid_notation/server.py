from __future__ import annotations
import logging
from mcp.server.fastmcp import FastMCP
from .tools import register as register_tools

logger = logging.getLogger("mermaid.notation.server")

mcp = FastMCP("mermaid-notation")

# Register tools once at import time
register_tools(mcp)
