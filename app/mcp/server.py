"""
MCP Server Implementation

Tool registry and dispatcher. A tool call names a registered tool and
supplies a parameter object; the server checks the tool's required
parameters, runs the handler and returns a uniform envelope.
"""

from typing import Dict, Any, Callable, List, Optional
from dataclasses import dataclass
import logging
import threading

from app.errors import TaskAppError, InternalError, UnknownToolError, ValidationError
from app.mcp.base_tool import create_error_response

logger = logging.getLogger(__name__)


@dataclass
class MCPTool:
    """MCP Tool definition"""
    name: str
    description: str
    parameters: Dict[str, Any]
    handler: Callable[..., Dict[str, Any]]

    @property
    def required(self) -> List[str]:
        return list(self.parameters.get("required", []))

    @property
    def accepted(self) -> List[str]:
        return list(self.parameters.get("properties", {}))


class MCPServer:
    """
    MCP Server for Task Management

    Handlers run while holding ``lock``; when the server is built around a
    TaskStore it shares the store's lock so that parameter validation and the
    store mutation happen as one step.
    """

    def __init__(self, name: str = "task-manager-mcp", version: str = "1.0.0",
                 lock: Optional[threading.RLock] = None):
        self.tools: Dict[str, MCPTool] = {}
        self.name = name
        self.version = version
        self.lock = lock or threading.RLock()
        logger.info(f"Initializing MCP Server: {self.name}")

    def register_tool(self, tool: MCPTool):
        """Register a tool with the MCP server"""
        if tool.name in self.tools:
            logger.warning(f"Tool {tool.name} already registered, overwriting")

        self.tools[tool.name] = tool
        logger.info(f"Registered MCP tool: {tool.name}")

    def get_tool(self, name: str) -> MCPTool:
        """Get a registered tool by name"""
        if name not in self.tools:
            raise UnknownToolError(name, available=self.list_tools())
        return self.tools[name]

    def list_tools(self) -> List[str]:
        """List all registered tool names"""
        return list(self.tools.keys())

    def invoke_tool(self, tool_name: str, parameters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Invoke a tool with parameters

        Args:
            tool_name: Name of the tool to invoke
            parameters: Tool parameters

        Returns:
            Tool execution result

        Raises:
            UnknownToolError: If the tool is not registered
            ValidationError: If a required parameter is missing
            TaskAppError: Whatever the handler raised
        """
        tool = self.get_tool(tool_name)
        # Parameters outside the tool's schema are dropped, never passed on
        supplied = parameters or {}
        params = {k: supplied[k] for k in tool.accepted if k in supplied}
        ignored = sorted(set(supplied) - set(params))
        if ignored:
            logger.debug(f"Ignoring unknown parameters for {tool_name}: {ignored}")

        with self.lock:
            for field in tool.required:
                value = params.get(field)
                if value is None or (isinstance(value, str) and not value.strip()):
                    raise ValidationError(
                        f"Missing required parameter: {field}",
                        details={"field": field, "tool": tool_name},
                    )

            logger.info(f"Invoking MCP tool: {tool_name}")

            try:
                result = tool.handler(**params)
            except TaskAppError as e:
                logger.warning(f"Tool {tool_name} failed: {e.message}")
                raise
            except Exception as e:
                logger.exception(f"Tool {tool_name} raised unexpectedly")
                raise InternalError(
                    f"Tool execution failed: {e}",
                    details={"tool": tool_name},
                ) from e

        logger.info(f"Tool {tool_name} executed successfully")
        return result

    def call_tool(self, tool_name: str, parameters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Invoke a tool and always return an envelope

        Errors are reported as {"success": False, "error": ...} instead of
        being raised.
        """
        try:
            return self.invoke_tool(tool_name, parameters)
        except TaskAppError as e:
            return create_error_response(e)

    def get_tool_schemas(self) -> List[Dict[str, Any]]:
        """Get the tool catalog: name, description and JSON input schema"""
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.parameters
            }
            for tool in self.tools.values()
        ]


# Global MCP server instance
_mcp_server: Optional[MCPServer] = None


def create_mcp_server(task_store=None, file_service=None, system_service=None) -> MCPServer:
    """
    Build an MCP server with all seven tools registered

    Collaborators default to the process-wide instances so that the HTTP
    routes and the tools operate on the same task store.
    """
    from app.config import APP_NAME, APP_VERSION
    from app.mcp.tools import register_all_tools
    from app.services.task_store import get_task_store
    from app.services.file_service import get_file_service
    from app.services.system_service import get_system_service

    if task_store is None:
        task_store = get_task_store()
    server = MCPServer(name=APP_NAME, version=APP_VERSION, lock=task_store.lock)
    register_all_tools(
        server,
        task_store,
        file_service if file_service is not None else get_file_service(),
        system_service if system_service is not None else get_system_service(),
    )
    return server


def get_mcp_server() -> MCPServer:
    """Get the global MCP server instance"""
    global _mcp_server
    if _mcp_server is None:
        _mcp_server = create_mcp_server()
    return _mcp_server
