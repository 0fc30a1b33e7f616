"""
Update Task MCP Tool

Applies a partial update to an existing task. Only the parameters supplied
by the caller are changed.
"""

from typing import Dict, Any

from app.mcp.base_tool import BaseMCPTool, create_success_response
from app.services.task_store import TaskStore, UPDATABLE_FIELDS


class UpdateTaskTool(BaseMCPTool):
    """MCP Tool for updating tasks"""

    name = "update_task"

    def __init__(self, store: TaskStore):
        self.store = store

    def execute(self, id: str = None, **kwargs) -> Dict[str, Any]:
        """
        Update task fields

        Args:
            id: ID of task to update
            **kwargs: Any of title, description, completed

        Returns:
            Updated task object
        """
        self.log_tool_invocation({"id": id, **kwargs})

        self.require_params({"id": id}, "id")

        patch = {field: kwargs[field] for field in UPDATABLE_FIELDS if field in kwargs}
        task = self.store.update(str(id), patch)

        return create_success_response(
            data=task.to_dict(),
            message=f"Task {task.id} updated successfully"
        )


def register_update_task_tool(mcp_server, store: TaskStore):
    """Register update_task tool with MCP server"""
    from app.mcp.server import MCPTool

    tool = MCPTool(
        name="update_task",
        description="Update an existing task",
        parameters={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "Task ID"},
                "title": {"type": "string", "description": "Task title"},
                "description": {"type": "string", "description": "Task description"},
                "completed": {"type": "boolean", "description": "Task completion status"}
            },
            "required": ["id"]
        },
        handler=lambda **kwargs: UpdateTaskTool(store).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
