"""
List Tasks MCP Tool

Returns every task in the shared store in insertion order.
"""

from typing import Dict, Any

from app.mcp.base_tool import BaseMCPTool, create_success_response
from app.services.task_store import TaskStore


class ListTasksTool(BaseMCPTool):
    """MCP Tool for listing tasks"""

    name = "list_tasks"

    def __init__(self, store: TaskStore):
        self.store = store

    def execute(self, **kwargs) -> Dict[str, Any]:
        """
        List all tasks

        Returns:
            Array of task objects
        """
        self.log_tool_invocation(kwargs)

        tasks = [task.to_dict() for task in self.store.list()]
        return create_success_response(
            data=tasks,
            message=self._generate_message(len(tasks))
        )

    def _generate_message(self, count: int) -> str:
        """Generate user-friendly message based on results"""
        if count == 0:
            return "There are no tasks yet."
        return f"Retrieved {count} task{'s' if count != 1 else ''}."


def register_list_tasks_tool(mcp_server, store: TaskStore):
    """Register list_tasks tool with MCP server"""
    from app.mcp.server import MCPTool

    tool = MCPTool(
        name="list_tasks",
        description="Get all tasks from the task manager",
        parameters={
            "type": "object",
            "properties": {},
        },
        handler=lambda **kwargs: ListTasksTool(store).execute(**kwargs)
    )

    mcp_server.register_tool(tool)
