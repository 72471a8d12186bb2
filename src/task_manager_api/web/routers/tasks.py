"""
Task API endpoints.

This module provides the REST endpoints over the in-memory task store:
create, list, get, update and delete. Store errors propagate to the
application's exception handlers, which turn them into 400/404 responses.
"""

from fastapi import APIRouter, Depends, Response, status

from ...core.store import TaskStore
from ..dependencies import get_task_store
from ..logging_utils import handle_api_errors, track_api_performance
from ..schemas import ErrorResponse, TaskCreate, TaskResponse, TaskUpdate

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}

# (method, path, summary) for the startup banner
ENDPOINTS: list[tuple[str, str, str]] = [
    ("POST", "/tasks", "Add a new task"),
    ("GET", "/tasks", "Get all tasks"),
    ("GET", "/tasks/{task_id}", "Get a single task by ID"),
    ("PUT", "/tasks/{task_id}", "Update a task by ID"),
    ("DELETE", "/tasks/{task_id}", "Delete a task by ID"),
]


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
@track_api_performance()
@handle_api_errors()
async def create_task(
    task_data: TaskCreate,
    store: TaskStore = Depends(get_task_store),
) -> TaskResponse:
    """
    Add a new task.

    - **title**: Task title (required)
    - **description**: Task description (required)

    New tasks always start in the ``pending`` status.
    """
    task = store.create(task_data.title, task_data.description)
    return TaskResponse.from_task(task)


@router.get("", response_model=list[TaskResponse])
@track_api_performance()
@handle_api_errors()
async def list_tasks(
    store: TaskStore = Depends(get_task_store),
) -> list[TaskResponse]:
    """Get all tasks in the order they were added."""
    return [TaskResponse.from_task(task) for task in store.list_all()]


@router.get("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND)
@track_api_performance()
@handle_api_errors()
async def get_task(
    task_id: str,
    store: TaskStore = Depends(get_task_store),
) -> TaskResponse:
    """
    Get a single task by ID.

    - **task_id**: The ID of the task to retrieve
    """
    return TaskResponse.from_task(store.get(task_id))


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
@track_api_performance()
@handle_api_errors()
async def update_task(
    task_id: str,
    task_data: TaskUpdate | None = None,
    store: TaskStore = Depends(get_task_store),
) -> TaskResponse:
    """
    Update an existing task.

    - **task_id**: The ID of the task to update
    - Only provided, non-empty fields are updated; a missing body changes nothing
    - An invalid **status** rejects the whole update
    """
    task_data = task_data or TaskUpdate()
    task = store.update(
        task_id,
        title=task_data.title,
        description=task_data.description,
        status=task_data.status,
    )
    return TaskResponse.from_task(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
@track_api_performance()
@handle_api_errors()
async def delete_task(
    task_id: str,
    store: TaskStore = Depends(get_task_store),
) -> Response:
    """
    Delete a task by ID.

    - **task_id**: The ID of the task to delete
    """
    store.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
