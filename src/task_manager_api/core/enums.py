"""Shared enums for the task manager."""

from enum import Enum


class TaskStatus(str, Enum):
    """Lifecycle status of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @classmethod
    def values(cls) -> list[str]:
        """Return the accepted wire values in declaration order."""
        return [member.value for member in cls]
