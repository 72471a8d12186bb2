"""
Middleware for FastAPI application.

This module provides request tracking and request/response logging.
"""

import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging_utils import log_api_request, log_api_response


def get_client_ip(request: Request) -> str:
    """Extract client IP address from request headers."""
    # Check for forwarded headers (load balancer/proxy)
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        # Take the first IP in the chain
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    return request.client.host if request.client else "unknown"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add unique request ID to each request for tracking."""

    async def dispatch(
        self, request: Request, call_next: Callable[..., Any]
    ) -> Response:
        """Add request ID header and make it available in request state."""
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log API requests and responses with timing information."""

    async def dispatch(
        self, request: Request, call_next: Callable[..., Any]
    ) -> Response:
        """Log request details and response timing."""
        start_time = time.time()
        request_id = getattr(request.state, "request_id", None)

        log_api_request(
            method=request.method,
            path=str(request.url.path),
            client_ip=get_client_ip(request),
            user_agent=request.headers.get("user-agent"),
            request_id=request_id,
        )

        response = await call_next(request)

        log_api_response(
            method=request.method,
            path=str(request.url.path),
            status_code=response.status_code,
            response_time_ms=(time.time() - start_time) * 1000,
            request_id=request_id,
        )

        return response
