"""Task model for the in-memory task store."""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(BaseModel):
    """Task entity representing a todo item."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    completed: bool = False
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=utcnow, alias="updatedAt")

    def to_dict(self) -> dict:
        """JSON-ready dict with camelCase timestamps."""
        return self.model_dump(by_alias=True, mode="json")
