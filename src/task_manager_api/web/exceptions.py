"""Custom exceptions for the web API."""

from ..utils.logging import TaskError, TaskNotFoundError, TaskValidationError


class TaskManagerAPIException(Exception):
    """Base exception for the Task Manager API."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_payload(self) -> dict[str, object]:
        """Render the JSON error body sent to clients."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
        }


class NotFoundError(TaskManagerAPIException):
    """Raised when a referenced resource does not exist."""

    def __init__(self, message: str):
        super().__init__(message, 404)


class ValidationError(TaskManagerAPIException):
    """Raised when request validation fails."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, 400)
        self.field = field


def from_task_error(error: TaskError) -> TaskManagerAPIException:
    """Map a store error onto the API exception carrying its HTTP status."""
    if isinstance(error, TaskNotFoundError):
        return NotFoundError(error.message)
    if isinstance(error, TaskValidationError):
        return ValidationError(error.message, error.field)
    return TaskManagerAPIException(error.message, 500)
