# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.mcp.server import MCPServer, create_mcp_server, get_mcp_server
from app.services.file_service import FileService, get_file_service
from app.services.system_service import SystemService, get_system_service
from app.services.task_store import TaskStore, get_task_store


@pytest.fixture()
def store() -> TaskStore:
    """Empty task store."""
    return TaskStore()


@pytest.fixture()
def seeded_store() -> TaskStore:
    """Task store holding the two demo tasks (ids "1" and "2")."""
    return TaskStore(seed_demo=True)


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    """Small workspace tree with files, a subdirectory and excluded dirs."""
    (tmp_path / "README.md").write_text("# Demo workspace\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("hello", encoding="utf-8")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("print('hi')\n", encoding="utf-8")
    for excluded in ("node_modules", ".git", "__pycache__"):
        (tmp_path / excluded).mkdir()
    # Dangling symlink: cannot be stat'ed, so listings skip it
    (tmp_path / "dangling").symlink_to(tmp_path / "missing-target")
    return tmp_path


@pytest.fixture()
def file_service(workspace: Path) -> FileService:
    return FileService(str(workspace))


@pytest.fixture()
def system_service() -> SystemService:
    return SystemService(port=8123)


@pytest.fixture()
def mcp_server(seeded_store: TaskStore, file_service: FileService, system_service: SystemService) -> MCPServer:
    """Dispatcher wired to the seeded store and the temporary workspace."""
    return create_mcp_server(seeded_store, file_service, system_service)


@pytest.fixture()
def client(
    seeded_store: TaskStore,
    file_service: FileService,
    system_service: SystemService,
    mcp_server: MCPServer,
):
    """
    TestClient whose routes and tool endpoint share one seeded store.

    Dependencies are overridden per test so no global state leaks between tests.
    """
    app.dependency_overrides[get_task_store] = lambda: seeded_store
    app.dependency_overrides[get_file_service] = lambda: file_service
    app.dependency_overrides[get_system_service] = lambda: system_service
    app.dependency_overrides[get_mcp_server] = lambda: mcp_server
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
