# tests/test_file_service.py

from __future__ import annotations

import logging

import pytest

from app.errors import FileAccessError, NotFoundError, ValidationError
from app.services.file_service import FileService


def test_list_files_skips_unreadable_entries_with_warning(
    file_service: FileService, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="app.services.file_service"):
        entries = file_service.list_files()

    assert "dangling" not in [entry["name"] for entry in entries]
    assert any("dangling" in record.getMessage() for record in caplog.records)


def test_list_files_entry_shape(file_service: FileService) -> None:
    entries = {entry["name"]: entry for entry in file_service.list_files()}

    assert entries["notes.txt"]["type"] == "file"
    assert entries["notes.txt"]["size"] == 5
    assert entries["src"]["type"] == "directory"
    assert "size" not in entries["src"]
    assert "modifiedTime" in entries["src"]


@pytest.mark.parametrize("path", ["", None, "../outside", "src/../../x", "/etc/passwd", "a\x00b"])
def test_read_file_rejects_invalid_paths(file_service: FileService, path) -> None:
    with pytest.raises(ValidationError):
        file_service.read_file(path)


def test_read_file_directory_and_missing_are_not_found(file_service: FileService) -> None:
    with pytest.raises(NotFoundError):
        file_service.read_file("src")
    with pytest.raises(NotFoundError):
        file_service.read_file("nope.txt")


def test_read_file_non_utf8_is_access_error(file_service: FileService, workspace) -> None:
    (workspace / "latin1.txt").write_bytes("caf\xe9".encode("latin-1"))

    with pytest.raises(FileAccessError):
        file_service.read_file("latin1.txt")
