"""
Read File MCP Tool

Reads a text file relative to the workspace root.
"""

from typing import Dict, Any

from app.mcp.base_tool import BaseMCPTool, create_success_response
from app.services.file_service import FileService


class ReadFileTool(BaseMCPTool):
    """MCP Tool for reading workspace files"""

    name = "read_file"

    def __init__(self, files: FileService):
        self.files = files

    def execute(self, path: str = None, **kwargs) -> Dict[str, Any]:
        self.log_tool_invocation({"path": path})

        self.require_params({"path": path}, "path")

        result = self.files.read_file(path)

        return create_success_response(
            data=result,
            message=f"File content for {path}"
        )


def register_read_file_tool(mcp_server, files: FileService):
    """Register read_file tool with MCP server"""
    from app.mcp.server import MCPTool

    tool = MCPTool(
        name="read_file",
        description="Read contents of a file",
        parameters={
            "type": "object",
            "properties": {
                "path": {"type": "string", "description": "File path to read"}
            },
            "required": ["path"]
        },
        handler=lambda **kwargs: ReadFileTool(files).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
