"""
FastAPI dependencies for store access and common functionality.
"""

from typing import cast

from fastapi import HTTPException, Request, status

from ..core.store import TaskStore
from .logging_utils import api_logger


def get_task_store(request: Request) -> TaskStore:
    """Get the task store from application state."""
    store = getattr(request.app.state, "task_store", None)
    if store is None:
        api_logger.error("Task store not found in application state")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Task store not available",
        )
    return cast(TaskStore, store)
