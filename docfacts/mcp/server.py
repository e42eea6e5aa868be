"""MCP server implementation for Docfacts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from docfacts.core.config import load_config, resolve_config_path
from docfacts.core.exceptions import DocfactsError
from docfacts.core.extractor import DeclarationExtractor

server = Server("docfacts")


def _get_extractor() -> DeclarationExtractor:
    """Get an extractor configured from the environment."""
    return DeclarationExtractor(load_config(resolve_config_path(None)))


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="docfacts_extract_file",
            description=(
                "Extract documentation facts for every declaration in a C# file: "
                "identifiers, type parameters, parameters, base types, thrown "
                "exceptions with messages, inline comments and returned identifiers."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {
                        "type": "string",
                        "description": "Path to the C# file, relative to the working directory",
                    },
                },
                "required": ["path"],
            },
        ),
        Tool(
            name="docfacts_extract_snippet",
            description=(
                "Extract documentation facts for every declaration in a C# source snippet."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "code": {
                        "type": "string",
                        "description": "C# source code",
                    },
                },
                "required": ["code"],
            },
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "docfacts_extract_file":
            result = _handle_extract_file(arguments["path"])
        elif name == "docfacts_extract_snippet":
            result = _handle_extract_snippet(arguments["code"])
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except DocfactsError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]
    except KeyError as e:
        return [TextContent(type="text", text=json.dumps({"error": f"Missing argument {e}"}))]


def _handle_extract_file(path: str) -> dict[str, Any]:
    """Handle docfacts_extract_file tool."""
    file = Path.cwd() / path
    declarations = _get_extractor().extract_file(file)
    return {"file": str(file), "declarations": [d.to_dict() for d in declarations]}


def _handle_extract_snippet(code: str) -> dict[str, Any]:
    """Handle docfacts_extract_snippet tool."""
    declarations = _get_extractor().extract_text(code)
    return {"declarations": [d.to_dict() for d in declarations]}


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
