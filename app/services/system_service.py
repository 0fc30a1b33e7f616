"""Process metrics and server status reporting."""
import platform
import sys
import time
from typing import Any, Dict, List, Optional

import psutil


class SystemService:
    """Reports runtime information about the current process."""

    def __init__(self, port: int = 8000):
        self.port = port
        self.started_at = time.time()
        self._process = psutil.Process()

    def memory(self) -> Dict[str, int]:
        """Process resident memory against total system memory, in bytes."""
        return {
            "used": self._process.memory_info().rss,
            "total": psutil.virtual_memory().total,
        }

    def process_uptime(self) -> float:
        return round(time.time() - self._process.create_time(), 3)

    def system_info(self) -> Dict[str, Any]:
        """Platform, interpreter version, memory and uptime of this process."""
        return {
            "platform": sys.platform,
            "processRuntimeVersion": f"Python {platform.python_version()}",
            "memory": self.memory(),
            "uptimeSeconds": self.process_uptime(),
        }

    def server_status(self, tools: List[str], connections: int = 0) -> Dict[str, Any]:
        """
        Status of the HTTP API, the MCP tool server and the host

        Args:
            tools: Names of the registered MCP tools
            connections: Number of active MCP sessions

        Returns:
            Status dictionary for GET /api/status
        """
        return {
            "httpApi": {
                "status": "running",
                "port": self.port,
                "uptime": round(time.time() - self.started_at, 3),
            },
            "mcpServer": {
                "status": "running" if tools else "stopped",
                "connections": connections,
                "tools": tools,
            },
            "system": {
                "memory": self.memory(),
                # Non-blocking: percentage since the previous call
                "cpu": {"usage": psutil.cpu_percent(interval=None)},
            },
        }


# Global system service instance
_system_service: Optional[SystemService] = None


def get_system_service() -> SystemService:
    global _system_service
    if _system_service is None:
        from app.config import PORT
        _system_service = SystemService(port=PORT)
    return _system_service
