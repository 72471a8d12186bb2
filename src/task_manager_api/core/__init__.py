"""Core task storage functionality."""

from .enums import TaskStatus
from .store import TaskStore
from .task import Task

__all__ = ["Task", "TaskStatus", "TaskStore"]
