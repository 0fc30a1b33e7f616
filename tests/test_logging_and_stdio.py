# tests/test_logging_and_stdio.py

from __future__ import annotations

import io
import json
import logging

import pytest

from app.mcp.stdio import build_stdio_server, format_tool_result, run_tool
from app.mcp.server import MCPServer
from app.utils.logger import JsonFormatter, setup_logging


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "Created %s", ("task",), None)
    record.task_id = "42"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Created task"
    assert payload["level"] == "INFO"
    assert payload["service"] == "app.test"
    assert payload["task_id"] == "42"


def test_setup_logging_does_not_stack_handlers() -> None:
    root = logging.getLogger()
    stream = io.StringIO()

    setup_logging("DEBUG", "json", stream=stream)
    setup_logging("DEBUG", "json", stream=stream)
    try:
        ours = [h for h in root.handlers if getattr(h, "_task_manager_handler", False)]
        assert len(ours) == 1

        logging.getLogger("app.test").info("hello")
        assert json.loads(stream.getvalue().splitlines()[-1])["message"] == "hello"
    finally:
        setup_logging("INFO", "text")


def test_format_tool_result() -> None:
    text = format_tool_result({"success": True, "data": {"id": "1"}, "message": "Task created successfully"})

    assert text.startswith("Task created successfully:\n")
    assert json.loads(text.split("\n", 1)[1]) == {"id": "1"}
    assert format_tool_result({"success": True, "data": []}) == "[]"


def test_build_stdio_server_uses_registry_name(mcp_server: MCPServer) -> None:
    server = build_stdio_server(mcp_server)
    assert server.name == mcp_server.name


def test_run_tool_returns_text_content(mcp_server: MCPServer) -> None:
    content = run_tool(mcp_server, "list_tasks", None)

    assert len(content) == 1
    assert content[0].type == "text"
    assert content[0].text.startswith("Retrieved 2 tasks.:\n")


def test_run_tool_reports_task_errors_as_tool_errors(mcp_server: MCPServer) -> None:
    with pytest.raises(RuntimeError, match="Tool execution failed: Task 404 not found"):
        run_tool(mcp_server, "delete_task", {"id": "404"})

    with pytest.raises(RuntimeError, match="Unknown tool: frobnicate"):
        run_tool(mcp_server, "frobnicate", {})
