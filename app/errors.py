"""
Error taxonomy for the Task Manager service

Every failure raised by the task store, the file/system collaborators and the
MCP dispatcher is a TaskAppError subclass. The HTTP layer and the dispatcher
translate them into the {"success": false, "error": ...} envelope.
"""

from typing import Any, Dict, Optional


class TaskAppError(Exception):
    """Base exception carrying an error code, message and HTTP status"""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(TaskAppError):
    """Missing or malformed required field"""

    code = "VALIDATION_ERROR"
    status_code = 400


class NotFoundError(TaskAppError):
    """Unknown task id or unreadable file path"""

    code = "NOT_FOUND"
    status_code = 404


class UnknownToolError(TaskAppError):
    """Dispatcher received a tool name that is not registered"""

    code = "UNKNOWN_TOOL"
    status_code = 404

    def __init__(self, tool_name: str, available: Optional[list] = None):
        self.tool_name = tool_name
        super().__init__(
            f"Unknown tool: {tool_name}",
            details={"tool": tool_name, "available_tools": available or []},
        )


class FileAccessError(TaskAppError):
    """File collaborator failed for a reason other than a missing file"""

    code = "IO_ERROR"
    status_code = 500


class InternalError(TaskAppError):
    """Catch-all for unexpected failures"""

    code = "INTERNAL_ERROR"
    status_code = 500
