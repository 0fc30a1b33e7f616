"""
System Info MCP Tool

Reports platform, interpreter version, memory usage and uptime.
"""

from typing import Dict, Any

from app.mcp.base_tool import BaseMCPTool, create_success_response
from app.services.system_service import SystemService


class SystemInfoTool(BaseMCPTool):
    """MCP Tool for reporting process metrics"""

    name = "system_info"

    def __init__(self, system: SystemService):
        self.system = system

    def execute(self, **kwargs) -> Dict[str, Any]:
        self.log_tool_invocation(kwargs)

        return create_success_response(
            data=self.system.system_info(),
            message="System information"
        )


def register_system_info_tool(mcp_server, system: SystemService):
    """Register system_info tool with MCP server"""
    from app.mcp.server import MCPTool

    tool = MCPTool(
        name="system_info",
        description="Get system information",
        parameters={
            "type": "object",
            "properties": {},
        },
        handler=lambda **kwargs: SystemInfoTool(system).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
