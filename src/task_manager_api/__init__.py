"""Task Manager API: an in-memory task list REST service."""

__version__ = "0.1.0"

from .core.store import TaskStore
from .core.task import Task

__all__ = ["TaskStore", "Task", "__version__"]
