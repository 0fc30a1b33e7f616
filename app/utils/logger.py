"""
Logging Utility for the Task Manager service.

Configures the root logger once, either with a plain console format or with
structured JSON lines.
"""

import logging
import sys
from datetime import datetime, timezone
import json

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# LogRecord attributes that are not user supplied "extra" fields
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "service": record.name,
        }

        # Structured data passed via logger.info(..., extra={...})
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(level: str = "INFO", fmt: str = "text", stream=None) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, ...)
        fmt: "text" for the console format, "json" for structured lines
        stream: Output stream, stdout unless given
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Prevent adding handlers multiple times (uvicorn reload, repeated imports)
    for handler in list(root.handlers):
        if getattr(handler, "_task_manager_handler", False):
            root.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler._task_manager_handler = True
    if fmt == "json":
        console_handler.setFormatter(JsonFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root.addHandler(console_handler)
