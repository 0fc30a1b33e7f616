"""In-memory task store shared by the HTTP API and the MCP tools."""
import logging
import threading
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.errors import NotFoundError, ValidationError
from app.models.task import Task, utcnow

logger = logging.getLogger(__name__)

# Fields a client may change through update()
UPDATABLE_FIELDS = ("title", "description", "completed")

DEMO_TASKS = [
    {
        "id": "1",
        "title": "Setup API Server",
        "description": "Create HTTP API endpoints for task management",
        "completed": True,
        "created_at": datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc),
    },
    {
        "id": "2",
        "title": "Implement MCP Server",
        "description": "Create MCP server with WebSocket support",
        "completed": False,
        "created_at": datetime(2024, 1, 15, 11, 0, tzinfo=timezone.utc),
    },
]


def _require_text(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"Task {field} is required and cannot be empty",
            details={"field": field},
        )
    return value


class TaskStore:
    """Insertion-ordered task collection.

    Every public operation runs under a single re-entrant lock so that
    concurrent callers never observe a half-applied mutation. The lock is
    exposed for callers that need to hold it across several operations.
    """

    def __init__(self, seed_demo: bool = False):
        self.lock = threading.RLock()
        self._tasks: List[Task] = []
        self._last_id = 0
        if seed_demo:
            self.seed_demo_tasks()

    def _next_id(self) -> str:
        # Millisecond timestamp, bumped past the previous id to stay unique
        candidate = time.time_ns() // 1_000_000
        self._last_id = max(candidate, self._last_id + 1)
        return str(self._last_id)

    def _index_of(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise NotFoundError(f"Task {task_id} not found", details={"id": task_id})

    def list(self) -> List[Task]:
        """Return all tasks in insertion order."""
        with self.lock:
            return list(self._tasks)

    def count(self) -> int:
        with self.lock:
            return len(self._tasks)

    def get(self, task_id: str) -> Task:
        with self.lock:
            return self._tasks[self._index_of(task_id)]

    def create(self, title: Optional[str], description: Optional[str]) -> Task:
        """Create and append a new task.

        Raises:
            ValidationError: If title or description is missing or empty
        """
        title = _require_text("title", title)
        description = _require_text("description", description)

        with self.lock:
            now = utcnow()
            task = Task(
                id=self._next_id(),
                title=title,
                description=description,
                completed=False,
                created_at=now,
                updated_at=now,
            )
            self._tasks.append(task)

        logger.info(f"Created task {task.id}: {task.title!r}")
        return task

    def update(self, task_id: str, patch: Optional[Dict[str, Any]] = None) -> Task:
        """Merge the keys present in ``patch`` into an existing task.

        Keys whose value is None are treated as absent. Unknown keys are
        ignored.

        Raises:
            NotFoundError: If no task has this id
            ValidationError: If a present field has an invalid value
        """
        patch = patch or {}

        with self.lock:
            # Unknown id wins over an invalid patch
            index = self._index_of(task_id)

            changes: Dict[str, Any] = {}
            for field in UPDATABLE_FIELDS:
                if patch.get(field) is None:
                    continue
                value = patch[field]
                if field == "completed":
                    if not isinstance(value, bool):
                        raise ValidationError(
                            "Task completed must be a boolean",
                            details={"field": field},
                        )
                else:
                    _require_text(field, value)
                changes[field] = value

            changes["updated_at"] = utcnow()
            updated = self._tasks[index].model_copy(update=changes)
            self._tasks[index] = updated

        logger.info(f"Updated task {task_id}: fields={sorted(changes)}")
        return updated

    def delete(self, task_id: str) -> Task:
        """Remove a task and return the removed record.

        Raises:
            NotFoundError: If no task has this id
        """
        with self.lock:
            removed = self._tasks.pop(self._index_of(task_id))

        logger.info(f"Deleted task {task_id}")
        return removed

    def seed_demo_tasks(self) -> None:
        """Replace the contents with the two demo tasks."""
        with self.lock:
            self._tasks = [
                Task(updated_at=data["created_at"], **data) for data in DEMO_TASKS
            ]
        logger.debug("Seeded task store with demo tasks")


# Global task store instance
_task_store: Optional[TaskStore] = None


def get_task_store() -> TaskStore:
    """Get the process-wide task store, creating it on first use."""
    global _task_store
    if _task_store is None:
        from app.config import SEED_DEMO_TASKS
        _task_store = TaskStore(seed_demo=SEED_DEMO_TASKS)
    return _task_store
