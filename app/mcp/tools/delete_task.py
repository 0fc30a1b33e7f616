"""
Delete Task MCP Tool

Removes a task from the shared store and echoes the removed record.
"""

from typing import Dict, Any

from app.mcp.base_tool import BaseMCPTool, create_success_response
from app.services.task_store import TaskStore


class DeleteTaskTool(BaseMCPTool):
    """MCP Tool for deleting tasks"""

    name = "delete_task"

    def __init__(self, store: TaskStore):
        self.store = store

    def execute(self, id: str = None, **kwargs) -> Dict[str, Any]:
        """
        Delete a task

        Args:
            id: ID of task to delete

        Returns:
            The removed task
        """
        self.log_tool_invocation({"id": id})

        self.require_params({"id": id}, "id")

        task = self.store.delete(str(id))

        return create_success_response(
            data=task.to_dict(),
            message=f"Task {task.id} '{task.title}' deleted"
        )


def register_delete_task_tool(mcp_server, store: TaskStore):
    """Register delete_task tool with MCP server"""
    from app.mcp.server import MCPTool

    tool = MCPTool(
        name="delete_task",
        description="Delete a task",
        parameters={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "Task ID"}
            },
            "required": ["id"]
        },
        handler=lambda **kwargs: DeleteTaskTool(store).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
