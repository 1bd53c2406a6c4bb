# src/mermaid_notation/tools/__init__.py
from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .mermaid_tools import register_mermaid_tools

def register(mcp: FastMCP) -> None:
    register_mermaid_tools(mcp)
