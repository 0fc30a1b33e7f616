"""
Stdio MCP entry point

Serves the task manager tool catalog over the Model Context Protocol stdio
transport so MCP clients (IDEs, agents) can call the same tools the HTTP
endpoint exposes.

Usage:
    python -m app.mcp.stdio
"""

import json
import logging
import sys
from typing import Any, Dict, Optional

import anyio
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from app.config import LOG_FORMAT, LOG_LEVEL
from app.errors import TaskAppError
from app.mcp.server import MCPServer, get_mcp_server
from app.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def format_tool_result(result: Dict[str, Any]) -> str:
    """Render a success envelope as the text block returned to MCP clients"""
    text = json.dumps(result.get("data"), indent=2, default=str)
    message = result.get("message")
    return f"{message}:\n{text}" if message else text


def build_stdio_server(mcp_server: MCPServer) -> Server:
    """Wrap the tool dispatcher in an MCP SDK server"""
    server = Server(mcp_server.name)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(
                name=schema["name"],
                description=schema["description"],
                inputSchema=schema["inputSchema"],
            )
            for schema in mcp_server.get_tool_schemas()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        return run_tool(mcp_server, name, arguments)

    return server


def run_tool(mcp_server: MCPServer, name: str, arguments: Optional[dict]) -> list[TextContent]:
    """
    Invoke a tool for an MCP client

    Raises:
        RuntimeError: Wrapping any TaskAppError; the SDK reports raised
            exceptions to the client as tool errors
    """
    try:
        result = mcp_server.invoke_tool(name, arguments or {})
    except TaskAppError as e:
        raise RuntimeError(f"Tool execution failed: {e.message}") from e
    return [TextContent(type="text", text=format_tool_result(result))]


async def run() -> None:
    mcp_server = get_mcp_server()
    server = build_stdio_server(mcp_server)
    logger.info(f"MCP stdio server starting with tools: {mcp_server.list_tools()}")

    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


if __name__ == "__main__":
    # stdout carries the protocol, so logs go to stderr
    setup_logging(LOG_LEVEL, LOG_FORMAT, stream=sys.stderr)
    anyio.run(run)
