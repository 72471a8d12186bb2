"""Task entity held by the in-memory store."""

from dataclasses import dataclass
from typing import Any

from .enums import TaskStatus


@dataclass
class Task:
    """A single to-do item."""

    id: str
    title: str
    description: str
    status: TaskStatus = TaskStatus.PENDING

    def to_dict(self) -> dict[str, Any]:
        """Get the task as its JSON shape.

        Returns:
            Dictionary with id, title, description and status
        """
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
        }
