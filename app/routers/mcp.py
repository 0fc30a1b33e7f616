"""
MCP API Router

Tool-call endpoint: the same task operations exposed as named tools with a
JSON parameter object instead of HTTP verb + path.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.errors import TaskAppError
from app.mcp.base_tool import create_error_response
from app.mcp.server import MCPServer, get_mcp_server
from app.schemas.task import ToolCallRequest

import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["MCP"])


@router.get("/mcp/tools")
async def list_tools(mcp_server: MCPServer = Depends(get_mcp_server)):
    """Return the static tool catalog."""
    return {
        "success": True,
        "data": mcp_server.get_tool_schemas(),
        "message": f"{len(mcp_server.tools)} tools available",
    }


@router.post("/mcp/call")
async def call_tool(
    request: ToolCallRequest,
    mcp_server: MCPServer = Depends(get_mcp_server),
):
    """
    Invoke a tool

    Request body: {"toolName": "...", "parameters": {...}}
    Returns {"success": true, "data": ...} or {"success": false, "error": ...}
    """
    try:
        return mcp_server.invoke_tool(request.toolName, request.parameters)
    except TaskAppError as e:
        logger.info(f"Tool call {request.toolName} rejected: {e.code}")
        return JSONResponse(status_code=e.status_code, content=create_error_response(e))
