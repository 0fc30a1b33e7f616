"""
MCP Base Tool Interface

Provides base functionality for all MCP tools including:
- Required parameter checks
- Audit logging
- Standard success/error envelopes
"""

from typing import Any, Dict, Optional
from abc import ABC, abstractmethod
import logging

from app.errors import TaskAppError, ValidationError

logger = logging.getLogger(__name__)

# Parameter names never written to the audit log
REDACTED_PARAMS = ("password", "token", "secret")


class BaseMCPTool(ABC):
    """
    Base class for all MCP tools

    Subclasses set ``name`` and implement ``execute``.
    """

    name: str = ""

    def require_params(self, params: Dict[str, Any], *names: str) -> None:
        """
        Validate that every named parameter is present and non-empty

        Raises:
            ValidationError: On the first missing parameter
        """
        for field in names:
            value = params.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                logger.warning(f"MCP tool {self.name} called without required parameter: {field}")
                raise ValidationError(
                    f"Missing required parameter: {field}",
                    details={"field": field, "tool": self.name},
                )

    def log_tool_invocation(self, params: Dict[str, Any]) -> None:
        """
        Log MCP tool invocation for audit trail

        Args:
            params: Tool parameters (sensitive data is redacted)
        """
        safe_params = {k: v for k, v in params.items() if k not in REDACTED_PARAMS}

        logger.info(f"MCP Tool Invocation: {self.name} | Params: {safe_params}")

    @abstractmethod
    def execute(self, **params) -> Dict[str, Any]:
        """
        Execute the tool logic

        Args:
            **params: Tool-specific parameters

        Returns:
            Success envelope built with create_success_response
        """


def create_error_response(error: TaskAppError) -> Dict[str, Any]:
    """
    Create a standardized error response

    Args:
        error: The TaskAppError to convert

    Returns:
        {"success": False, "error": message, "code": code, "details": {...}}
    """
    response = {
        "success": False,
        "error": error.message,
        "code": error.code,
    }

    if error.details:
        response["details"] = error.details

    return response


def create_success_response(data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    """
    Create a standardized success response

    Args:
        data: The response data
        message: Optional success message

    Returns:
        Standardized success response dictionary
    """
    response = {
        "success": True,
        "data": data
    }

    if message:
        response["message"] = message

    return response
