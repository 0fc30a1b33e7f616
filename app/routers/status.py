"""Status router: HTTP API, MCP server and host metrics."""
from fastapi import APIRouter, Depends

from app.mcp.server import MCPServer, get_mcp_server
from app.schemas.task import ApiResponse
from app.services.system_service import SystemService, get_system_service

router = APIRouter(tags=["Status"])


@router.get("/status", response_model=ApiResponse)
async def server_status(
    system: SystemService = Depends(get_system_service),
    mcp_server: MCPServer = Depends(get_mcp_server),
):
    """Report the status of the HTTP API and the MCP tool server."""
    return ApiResponse(
        success=True,
        data=system.server_status(tools=mcp_server.list_tools()),
        message="Server status retrieved successfully",
    )
