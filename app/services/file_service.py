"""Workspace file listing and reading for the file API and MCP tools."""
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from app.errors import FileAccessError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Build output, dependency and VCS directories hidden from listings
EXCLUDED_NAMES = frozenset({
    "node_modules",
    ".next",
    ".git",
    "dist",
    "build",
    "__pycache__",
    ".venv",
    ".pytest_cache",
})


class FileService:
    """Read-only access to the files directly under a workspace root."""

    def __init__(self, workspace_dir: str):
        self.workspace = Path(workspace_dir)

    def list_files(self) -> List[Dict[str, Any]]:
        """
        List the entries of the workspace root

        Entries that cannot be inspected are skipped with a warning.

        Returns:
            List of {name, path, type, size?, modifiedTime?} dicts sorted by name

        Raises:
            FileAccessError: If the workspace itself cannot be read
        """
        try:
            names = sorted(os.listdir(self.workspace))
        except OSError as e:
            raise FileAccessError(
                f"Failed to list files: {e.strerror or e}",
                details={"workspace": str(self.workspace)},
            ) from e

        entries = []
        for name in names:
            if name in EXCLUDED_NAMES:
                continue
            try:
                stats = (self.workspace / name).stat()
            except OSError as e:
                logger.warning(f"Could not read file info for {name}: {e}")
                continue

            is_dir = (self.workspace / name).is_dir()
            entry: Dict[str, Any] = {
                "name": name,
                "path": name,
                "type": "directory" if is_dir else "file",
                "modifiedTime": datetime.fromtimestamp(stats.st_mtime, tz=timezone.utc).isoformat(),
            }
            if not is_dir:
                entry["size"] = stats.st_size
            entries.append(entry)

        return entries

    def resolve(self, relative_path: Optional[str]) -> Path:
        """Validate a client supplied path and join it onto the workspace."""
        if not relative_path or not isinstance(relative_path, str):
            raise ValidationError("File path is required", details={"field": "path"})

        # Reject parent-directory segments and absolute paths
        if ".." in relative_path or relative_path.startswith(("/", "\\")) or os.path.isabs(relative_path):
            raise ValidationError("Invalid file path", details={"path": relative_path})

        if "\x00" in relative_path:
            raise ValidationError("File path contains a null byte", details={"field": "path"})

        return self.workspace / relative_path

    def read_file(self, relative_path: Optional[str]) -> Dict[str, Any]:
        """
        Read a UTF-8 text file from the workspace

        Args:
            relative_path: Path relative to the workspace root

        Returns:
            {content, path, size}

        Raises:
            ValidationError: If the path is missing or escapes the workspace
            NotFoundError: If the file does not exist or is a directory
            FileAccessError: For any other read failure
        """
        full_path = self.resolve(relative_path)

        try:
            content = full_path.read_text(encoding="utf-8")
            size = full_path.stat().st_size
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise NotFoundError(
                f"File not found: {relative_path}",
                details={"path": relative_path},
            ) from e
        except UnicodeDecodeError as e:
            raise FileAccessError(
                f"File is not valid UTF-8 text: {relative_path}",
                details={"path": relative_path},
            ) from e
        except OSError as e:
            raise FileAccessError(
                f"Failed to read file: {e.strerror or e}",
                details={"path": relative_path},
            ) from e

        logger.info(f"Read file {relative_path} ({size} bytes)")
        return {"content": content, "path": relative_path, "size": size}


# Global file service instance
_file_service: Optional[FileService] = None


def get_file_service() -> FileService:
    """Get the file service bound to the configured workspace."""
    global _file_service
    if _file_service is None:
        from app.config import WORKSPACE_DIR
        _file_service = FileService(WORKSPACE_DIR)
    return _file_service
