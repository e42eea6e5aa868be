"""
MCP server for Docfacts.

Exposes declaration fact extraction to LLMs via the Model Context Protocol.

Tools:
    - docfacts_extract_file: Facts for every declaration in a C# file
    - docfacts_extract_snippet: Facts for every declaration in a C# snippet

Usage:
    Install: pip install docfacts
    Run: docfacts-mcp
"""

import asyncio

from docfacts.mcp.server import serve as _serve


def serve() -> None:
    """Entry point for the MCP server."""
    asyncio.run(_serve())


__all__ = ["serve"]
