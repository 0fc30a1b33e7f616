"""
Create Task MCP Tool

Creates a new task in the shared store.
"""

from typing import Dict, Any

from app.mcp.base_tool import BaseMCPTool, create_success_response
from app.services.task_store import TaskStore


class CreateTaskTool(BaseMCPTool):
    """MCP Tool for creating tasks"""

    name = "create_task"

    def __init__(self, store: TaskStore):
        self.store = store

    def execute(self, title: str = None, description: str = None, **kwargs) -> Dict[str, Any]:
        """
        Create a new task

        Args:
            title: Task title
            description: Task description

        Returns:
            Created task object
        """
        self.log_tool_invocation({"title": title})

        self.require_params({"title": title, "description": description}, "title", "description")

        task = self.store.create(title=title, description=description)

        return create_success_response(
            data=task.to_dict(),
            message=f"Task created successfully: '{task.title}'"
        )


def register_create_task_tool(mcp_server, store: TaskStore):
    """Register create_task tool with MCP server"""
    from app.mcp.server import MCPTool

    tool = MCPTool(
        name="create_task",
        description="Create a new task",
        parameters={
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Task title"},
                "description": {"type": "string", "description": "Task description"}
            },
            "required": ["title", "description"]
        },
        handler=lambda **kwargs: CreateTaskTool(store).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
