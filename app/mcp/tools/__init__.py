"""MCP tool implementations and registration."""

from app.mcp.tools.list_tasks import register_list_tasks_tool
from app.mcp.tools.create_task import register_create_task_tool
from app.mcp.tools.update_task import register_update_task_tool
from app.mcp.tools.delete_task import register_delete_task_tool
from app.mcp.tools.read_file import register_read_file_tool
from app.mcp.tools.list_files import register_list_files_tool
from app.mcp.tools.system_info import register_system_info_tool


def register_all_tools(mcp_server, task_store, file_service, system_service):
    """Register the seven catalog tools, in catalog order"""
    register_list_tasks_tool(mcp_server, task_store)
    register_create_task_tool(mcp_server, task_store)
    register_update_task_tool(mcp_server, task_store)
    register_delete_task_tool(mcp_server, task_store)
    register_read_file_tool(mcp_server, file_service)
    register_list_files_tool(mcp_server, file_service)
    register_system_info_tool(mcp_server, system_service)


__all__ = ["register_all_tools"]
