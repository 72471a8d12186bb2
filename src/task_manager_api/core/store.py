"""
In-memory task store.

The store owns the ordered task collection for the lifetime of the process
and is the only code path that writes it. Lookups are linear scans over the
collection, which keeps insertion order observable through ``list_all``.

Requests are expected to reach the store one at a time (the web layer calls
it from the event loop without awaiting in between); there is no locking.
"""

import uuid
from collections.abc import Callable
from typing import Any

from ..utils.logging import (
    LogContext,
    TaskNotFoundError,
    TaskValidationError,
    get_logger,
)
from .enums import TaskStatus
from .task import Task

logger = get_logger(__name__, LogContext.STORE)

SEED_TASKS: list[dict[str, str]] = [
    {
        "id": "1",
        "title": "Learn Node.js",
        "description": "Complete a Node.js tutorial and build a basic server.",
        "status": "pending",
    },
    {
        "id": "2",
        "title": "Build REST API",
        "description": "Develop a REST API with CRUD operations using Express.js.",
        "status": "in-progress",
    },
    {
        "id": "3",
        "title": "Prepare for Internship",
        "description": "Review common interview questions and technical concepts.",
        "status": "completed",
    },
]


def generate_task_id() -> str:
    """Generate a collision-resistant task identifier."""
    return uuid.uuid4().hex


def _parse_status(value: Any) -> TaskStatus:
    """Convert a wire status value to TaskStatus or raise a validation error."""
    if isinstance(value, TaskStatus):
        return value
    try:
        return TaskStatus(value)
    except ValueError:
        raise TaskValidationError(
            "Invalid status provided. Must be one of: "
            + ", ".join(TaskStatus.values())
            + ".",
            field="status",
        ) from None


class TaskStore:
    """Owner of the task collection."""

    def __init__(
        self,
        seed: bool = True,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            seed: Load the three starter tasks
            id_factory: Callable producing new task ids (defaults to UUID4 hex)
        """
        self._seed = seed
        self._id_factory = id_factory or generate_task_id
        self._tasks: list[Task] = []
        self.reset()

    def __len__(self) -> int:
        return len(self._tasks)

    def reset(self) -> None:
        """Restore the collection to its startup state."""
        self._tasks = []
        if self._seed:
            self._tasks = [
                Task(
                    id=item["id"],
                    title=item["title"],
                    description=item["description"],
                    status=TaskStatus(item["status"]),
                )
                for item in SEED_TASKS
            ]
        logger.debug("Task store reset", task_count=len(self._tasks))

    def _new_id(self) -> str:
        task_id = self._id_factory()
        # An injected factory may repeat itself; ids must stay unique.
        while self._find(task_id) is not None:
            task_id = self._id_factory()
        return task_id

    def _find(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def create(self, title: str | None, description: str | None) -> Task:
        """Create a task and append it to the collection.

        Args:
            title: Task title, required and non-empty
            description: Task description, required and non-empty

        Returns:
            The created task with status ``pending``

        Raises:
            TaskValidationError: If title or description is missing or empty
        """
        if not title or not description:
            raise TaskValidationError(
                "title and description are required",
                field="title" if not title else "description",
            )

        task = Task(
            id=self._new_id(),
            title=title,
            description=description,
            status=TaskStatus.PENDING,
        )
        self._tasks.append(task)

        logger.info("New task added", task_id=task.id, title=task.title)
        return task

    def list_all(self) -> list[Task]:
        """Return every task in insertion order."""
        logger.debug("All tasks requested", task_count=len(self._tasks))
        return list(self._tasks)

    def get(self, task_id: str) -> Task:
        """Return the task with the given id.

        Raises:
            TaskNotFoundError: If no task has that id
        """
        task = self._find(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        logger.debug("Task requested", task_id=task_id)
        return task

    def update(
        self,
        task_id: str,
        title: str | None = None,
        description: str | None = None,
        status: str | TaskStatus | None = None,
    ) -> Task:
        """Apply a partial update to a task.

        Empty or missing fields are left unchanged. The status is validated
        before anything is written, so a rejected update leaves the task as
        it was.

        Raises:
            TaskNotFoundError: If no task has that id
            TaskValidationError: If status is not one of the accepted values
        """
        task = self._find(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        new_status = _parse_status(status) if status else None

        if title:
            task.title = title
        if description:
            task.description = description
        if new_status is not None:
            task.status = new_status

        logger.info("Task updated", task_id=task_id, status=task.status.value)
        return task

    def delete(self, task_id: str) -> None:
        """Remove the task with the given id.

        Raises:
            TaskNotFoundError: If no task has that id
        """
        initial_length = len(self._tasks)
        self._tasks = [task for task in self._tasks if task.id != task_id]

        if len(self._tasks) == initial_length:
            raise TaskNotFoundError(task_id)

        logger.info("Task deleted", task_id=task_id)
