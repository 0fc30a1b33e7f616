# tests/test_mcp_server.py

from __future__ import annotations

import pytest

from app.errors import NotFoundError, UnknownToolError, ValidationError
from app.mcp.server import MCPServer, MCPTool
from app.services.task_store import TaskStore

CATALOG = [
    "list_tasks",
    "create_task",
    "update_task",
    "delete_task",
    "read_file",
    "list_files",
    "system_info",
]


def test_catalog_has_seven_tools_in_order(mcp_server: MCPServer) -> None:
    assert mcp_server.list_tools() == CATALOG

    schemas = {s["name"]: s for s in mcp_server.get_tool_schemas()}
    assert schemas["create_task"]["inputSchema"]["required"] == ["title", "description"]
    assert schemas["update_task"]["inputSchema"]["required"] == ["id"]
    assert schemas["delete_task"]["inputSchema"]["required"] == ["id"]
    assert schemas["read_file"]["inputSchema"]["required"] == ["path"]
    assert "required" not in schemas["list_tasks"]["inputSchema"]


def test_list_tasks_returns_store_contents(mcp_server: MCPServer) -> None:
    result = mcp_server.invoke_tool("list_tasks", {})

    assert result["success"] is True
    assert [t["id"] for t in result["data"]] == ["1", "2"]
    assert result["message"] == "Retrieved 2 tasks."


def test_create_task_appends_to_shared_store(mcp_server: MCPServer, seeded_store: TaskStore) -> None:
    result = mcp_server.invoke_tool("create_task", {"title": "Write tests", "description": "Cover tools"})

    assert result["success"] is True
    assert result["data"]["completed"] is False
    assert seeded_store.list()[-1].id == result["data"]["id"]


def test_create_task_missing_description_fails_before_store(mcp_server: MCPServer, seeded_store: TaskStore) -> None:
    with pytest.raises(ValidationError) as exc_info:
        mcp_server.invoke_tool("create_task", {"title": "Only title"})

    assert exc_info.value.details["field"] == "description"
    assert seeded_store.count() == 2


def test_update_task_without_id_fails_validation(mcp_server: MCPServer, seeded_store: TaskStore) -> None:
    before = seeded_store.list()

    with pytest.raises(ValidationError):
        mcp_server.invoke_tool("update_task", {"title": "No id"})

    assert seeded_store.list() == before


def test_update_task_applies_partial_patch(mcp_server: MCPServer, seeded_store: TaskStore) -> None:
    result = mcp_server.invoke_tool("update_task", {"id": "2", "completed": True})

    assert result["data"]["completed"] is True
    assert result["data"]["title"] == "Implement MCP Server"
    assert seeded_store.get("2").completed is True


def test_update_task_unknown_id_is_not_found(mcp_server: MCPServer) -> None:
    with pytest.raises(NotFoundError):
        mcp_server.invoke_tool("update_task", {"id": "999", "title": "x"})


def test_delete_task_scenario(mcp_server: MCPServer) -> None:
    result = mcp_server.invoke_tool("delete_task", {"id": "2"})

    assert result["success"] is True
    assert result["data"]["id"] == "2"

    remaining = mcp_server.invoke_tool("list_tasks", {})
    assert [t["id"] for t in remaining["data"]] == ["1"]


def test_unknown_tool_raises_and_leaves_state(mcp_server: MCPServer, seeded_store: TaskStore) -> None:
    before = seeded_store.list()

    with pytest.raises(UnknownToolError) as exc_info:
        mcp_server.invoke_tool("frobnicate", {"id": "1"})

    assert exc_info.value.tool_name == "frobnicate"
    assert seeded_store.list() == before


def test_call_tool_wraps_errors_in_envelope(mcp_server: MCPServer) -> None:
    unknown = mcp_server.call_tool("frobnicate")
    assert unknown["success"] is False
    assert unknown["code"] == "UNKNOWN_TOOL"
    assert "frobnicate" in unknown["error"]

    missing = mcp_server.call_tool("delete_task", {"id": "404"})
    assert missing == {
        "success": False,
        "error": "Task 404 not found",
        "code": "NOT_FOUND",
        "details": {"id": "404"},
    }


def test_file_tools_use_workspace(mcp_server: MCPServer) -> None:
    listing = mcp_server.invoke_tool("list_files", {})
    names = [entry["name"] for entry in listing["data"]]
    assert names == ["README.md", "notes.txt", "src"]

    read = mcp_server.invoke_tool("read_file", {"path": "notes.txt"})
    assert read["data"] == {"content": "hello", "path": "notes.txt", "size": 5}

    with pytest.raises(ValidationError):
        mcp_server.invoke_tool("read_file", {"path": "../secret"})
    with pytest.raises(ValidationError):
        mcp_server.invoke_tool("read_file", {})


def test_system_info_tool_shape(mcp_server: MCPServer) -> None:
    data = mcp_server.invoke_tool("system_info", {})["data"]

    assert set(data) == {"platform", "processRuntimeVersion", "memory", "uptimeSeconds"}
    assert set(data["memory"]) == {"used", "total"}


def test_unexpected_handler_error_becomes_internal_error() -> None:
    def boom(**kwargs):
        raise RuntimeError("kaboom")

    server = MCPServer()
    server.register_tool(MCPTool(name="boom", description="fails", parameters={"type": "object"}, handler=boom))

    result = server.call_tool("boom", {})

    assert result["success"] is False
    assert result["code"] == "INTERNAL_ERROR"
    assert "kaboom" in result["error"]


def test_parameters_outside_schema_are_dropped(mcp_server: MCPServer, seeded_store: TaskStore) -> None:
    result = mcp_server.invoke_tool(
        "create_task",
        {"title": "t", "description": "d", "self": 1, "completed": True},
    )

    assert result["success"] is True
    assert result["data"]["completed"] is False
    assert seeded_store.count() == 3

    listed = mcp_server.call_tool("list_tasks", {"self": "x", "store": None})
    assert listed["success"] is True


def test_read_file_tool_rejects_null_byte(mcp_server: MCPServer) -> None:
    result = mcp_server.call_tool("read_file", {"path": "a\x00b"})

    assert result["success"] is False
    assert result["code"] == "VALIDATION_ERROR"
