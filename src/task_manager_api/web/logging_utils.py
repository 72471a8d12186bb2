"""
Logging utilities for web interface components.

This module provides specialized logging for:
- FastAPI request/response logging
- Endpoint error and performance tracking
"""

import functools
import inspect
import time
from collections.abc import Callable
from typing import Any

from ..utils.logging import LogContext, TaskError, get_logger

# Web component loggers
api_logger = get_logger(__name__ + ".api", LogContext.WEB)


def log_api_request(
    method: str,
    path: str,
    client_ip: str,
    user_agent: str | None = None,
    request_id: str | None = None,
) -> None:
    """Log incoming API requests."""
    api_logger.info(
        "API request received",
        method=method,
        path=path,
        client_ip=client_ip,
        user_agent=user_agent,
        request_id=request_id,
    )


def log_api_response(
    method: str,
    path: str,
    status_code: int,
    response_time_ms: float,
    request_id: str | None = None,
) -> None:
    """Log API responses with timing."""
    log_level = "info" if 200 <= status_code < 400 else "warning"

    getattr(api_logger, log_level)(
        "API response sent",
        method=method,
        path=path,
        status_code=status_code,
        response_time_ms=response_time_ms,
        request_id=request_id,
    )


def log_endpoints(routes: list[tuple[str, str, str]]) -> None:
    """Log the available endpoints at startup."""
    for method, path, summary in routes:
        api_logger.info(f"  {method} {path} - {summary}", method=method, path=path)


def handle_api_errors() -> Callable[..., Any]:
    """Async-aware decorator for API error logging.

    Store errors are expected client mistakes and are logged as warnings;
    anything else is logged with its traceback. Both are re-raised for the
    application's exception handlers.
    """

    def _log_error(func: Callable[..., Any], error: Exception) -> None:
        if isinstance(error, TaskError):
            api_logger.warning(
                f"Request rejected in {func.__name__}: {error.message}",
                function=func.__name__,
                error_type=type(error).__name__,
                **error.context,
            )
        else:
            api_logger.error(
                f"API error in {func.__name__}: {str(error)}",
                exception=error,
                function=func.__name__,
                error_type=type(error).__name__,
            )

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    _log_error(func, e)
                    raise

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                _log_error(func, e)
                raise

        return sync_wrapper

    return decorator


def track_api_performance() -> Callable[..., Any]:
    """Async-aware decorator for API performance tracking."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                start_time = time.time()
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    api_logger.debug(
                        f"Performance: {func.__name__} failed",
                        function=func.__name__,
                        execution_time_ms=(time.time() - start_time) * 1000,
                        status="error",
                        error=str(e),
                    )
                    raise
                api_logger.debug(
                    f"Performance: {func.__name__} completed",
                    function=func.__name__,
                    execution_time_ms=(time.time() - start_time) * 1000,
                    status="success",
                )
                return result

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                api_logger.debug(
                    f"Performance: {func.__name__} failed",
                    function=func.__name__,
                    execution_time_ms=(time.time() - start_time) * 1000,
                    status="error",
                    error=str(e),
                )
                raise
            api_logger.debug(
                f"Performance: {func.__name__} completed",
                function=func.__name__,
                execution_time_ms=(time.time() - start_time) * 1000,
                status="success",
            )
            return result

        return sync_wrapper

    return decorator
