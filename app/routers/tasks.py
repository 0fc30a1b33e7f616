"""Task router: CRUD over the shared in-memory task store."""
from fastapi import APIRouter, Depends, status
from typing import Optional

from app.schemas.task import TaskCreate, TaskUpdate, TaskResponse, TaskListResponse
from app.services.task_store import TaskStore, get_task_store

router = APIRouter(tags=["Tasks"])  # No prefix since main.py adds /api prefix


@router.get("/tasks", response_model=TaskListResponse)
async def list_tasks(store: TaskStore = Depends(get_task_store)):
    """List all tasks in insertion order."""
    tasks = store.list()
    return TaskListResponse(
        success=True,
        data=tasks,
        message=f"Retrieved {len(tasks)} tasks",
    )


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: Optional[TaskCreate] = None,
    store: TaskStore = Depends(get_task_store),
):
    """Create a new task; title and description are required."""
    task_data = task_data or TaskCreate()
    task = store.create(title=task_data.title, description=task_data.description)
    return TaskResponse(success=True, data=task, message="Task created successfully")


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Get a specific task by ID."""
    task = store.get(task_id)
    return TaskResponse(success=True, data=task, message="Task retrieved successfully")


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    task_data: Optional[TaskUpdate] = None,
    store: TaskStore = Depends(get_task_store),
):
    """Update a task; only fields present in the body are changed."""
    patch = task_data.to_patch() if task_data else {}
    task = store.update(task_id, patch)
    return TaskResponse(success=True, data=task, message="Task updated successfully")


@router.delete("/tasks/{task_id}", response_model=TaskResponse)
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Delete a task and return the removed record."""
    task = store.delete(task_id)
    return TaskResponse(success=True, data=task, message="Task deleted successfully")
