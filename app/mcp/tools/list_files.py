"""
List Files MCP Tool

Lists the entries of the workspace root, skipping build and VCS directories.
"""

from typing import Dict, Any

from app.mcp.base_tool import BaseMCPTool, create_success_response
from app.services.file_service import FileService


class ListFilesTool(BaseMCPTool):
    """MCP Tool for listing workspace files"""

    name = "list_files"

    def __init__(self, files: FileService):
        self.files = files

    def execute(self, **kwargs) -> Dict[str, Any]:
        self.log_tool_invocation(kwargs)

        entries = self.files.list_files()

        return create_success_response(
            data=entries,
            message=f"Listed {len(entries)} files and directories"
        )


def register_list_files_tool(mcp_server, files: FileService):
    """Register list_files tool with MCP server"""
    from app.mcp.server import MCPTool

    tool = MCPTool(
        name="list_files",
        description="List files in the workspace",
        parameters={
            "type": "object",
            "properties": {},
        },
        handler=lambda **kwargs: ListFilesTool(files).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
