"""Routers package for the Task Manager API."""

from .files import router as files_router
from .mcp import router as mcp_router
from .status import router as status_router
from .tasks import router as tasks_router

__all__ = ["files_router", "mcp_router", "status_router", "tasks_router"]
