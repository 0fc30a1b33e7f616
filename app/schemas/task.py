"""Request/response schemas for the task API."""
from pydantic import AliasChoices, BaseModel, Field
from typing import Any, Dict, Generic, Optional, TypeVar

from app.models.task import Task

T = TypeVar("T")


class TaskCreate(BaseModel):
    """Schema for creating a task.

    Fields are optional here so that missing values surface as a 400
    validation error from the store instead of FastAPI's 422.
    """
    title: Optional[str] = None
    description: Optional[str] = None


class TaskUpdate(BaseModel):
    """Schema for a partial task update; only keys sent by the client are applied."""
    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None

    def to_patch(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ApiResponse(BaseModel, Generic[T]):
    """Uniform response envelope shared by every endpoint."""
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[str] = None


class TaskResponse(ApiResponse[Task]):
    """Envelope wrapping a single task."""


class TaskListResponse(ApiResponse[list[Task]]):
    """Envelope wrapping the task list."""


class ReadFileRequest(BaseModel):
    """Body of POST /api/files/read."""
    path: Optional[str] = None


class ToolCallRequest(BaseModel):
    """Tool-call envelope: tool name plus JSON parameters."""
    toolName: str = Field(..., min_length=1, validation_alias=AliasChoices("toolName", "tool"))
    parameters: Optional[Dict[str, Any]] = None
