"""API routers for the Task Manager web interface."""

from .tasks import router as tasks_router

__all__ = ["tasks_router"]
