"""Pydantic schemas for API request/response validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.enums import TaskStatus
from ..core.task import Task

__all__ = [
    "TaskStatus",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "ErrorResponse",
]


class TaskCreate(BaseModel):
    """Schema for creating tasks.

    Presence of title and description is checked by the store so that a
    missing field is reported as a 400 with a single message.
    """

    title: str | None = None
    description: str | None = None


class TaskUpdate(BaseModel):
    """Schema for partial task updates; omitted fields are left unchanged."""

    title: str | None = None
    description: str | None = None
    status: str | None = Field(
        default=None,
        description="One of: " + ", ".join(TaskStatus.values()),
    )


class TaskResponse(BaseModel):
    """Schema for task responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    status: str

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, value: Any) -> Any:
        """Convert TaskStatus enum to string value."""
        if hasattr(value, "value"):
            return value.value
        return value

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        """Create schema from a store task."""
        return cls.model_validate(task)


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    error: str
    message: str
    status_code: int
