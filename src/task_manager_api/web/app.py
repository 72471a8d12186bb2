"""FastAPI web application for the Task Manager API."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config.loader import TaskManagerConfig, load_config
from ..core.store import TaskStore
from ..utils.logging import TaskError
from .exceptions import TaskManagerAPIException, ValidationError, from_task_error
from .logging_utils import api_logger, log_endpoints
from .middleware import LoggingMiddleware, RequestIDMiddleware
from .routers import tasks_router
from .routers.tasks import ENDPOINTS


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifespan events."""
    api_logger.info("Starting Task Manager API server")
    api_logger.info("Task store ready", task_count=len(app.state.task_store))

    api_logger.info("API Endpoints:")
    log_endpoints(ENDPOINTS)

    yield

    api_logger.info("Task Manager API server shutdown complete")


def _error_response(exc: TaskManagerAPIException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def create_app(
    config: TaskManagerConfig | None = None,
    store: TaskStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Application configuration (defaults are used when omitted)
        store: Task store to serve; a fresh one is created when omitted
    """
    config = config or TaskManagerConfig()

    app = FastAPI(
        title="Task Manager API",
        description="In-memory task list REST API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.task_store = (
        store if store is not None else TaskStore(seed=config.seed_tasks)
    )

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Accept"],
        )

    # Last added runs first, so the request ID exists before logging
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(TaskManagerAPIException)
    async def api_exception_handler(
        request: Request, exc: TaskManagerAPIException
    ) -> JSONResponse:
        """Handle custom API exceptions."""
        return _error_response(exc)

    @app.exception_handler(TaskError)
    async def task_error_handler(request: Request, exc: TaskError) -> JSONResponse:
        """Handle store errors raised by endpoints."""
        return _error_response(from_task_error(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request bodies as 400 Bad Request."""
        errors = exc.errors()
        first = errors[0] if errors else {}
        if first.get("type") == "json_invalid":
            return _error_response(ValidationError("Request body must be valid JSON."))

        field = ".".join(
            str(part) for part in first.get("loc", ()) if part != "body"
        )
        message = first.get("msg", "Invalid request")
        if field:
            message = f"Invalid value for '{field}': {message}"
        return _error_response(ValidationError(message, field or None))

    app.include_router(tasks_router, prefix="/tasks", tags=["tasks"])

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/ping")
    async def ping() -> dict[str, str]:
        """Ping endpoint for simple health check."""
        return {"status": "ok"}

    return app


def app_factory() -> FastAPI:
    """Build the application from the loaded configuration (uvicorn factory)."""
    return create_app(load_config())
