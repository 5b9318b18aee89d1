"""
Request logging middleware for FastAPI application.

Logs one line per request and response, tagged with a correlation id.
"""

import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from app.core.shared.logger import get_api_logger

CORRELATION_HEADER = "X-Correlation-ID"

logger = get_api_logger("requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    HTTP middleware for request/response logging.

    The correlation id is taken from the X-Correlation-ID header when the
    caller sends one, and echoed back on the response.
    """

    EXCLUDE_PATHS: tuple[str, ...] = ("/health",)

    def __init__(self, app: ASGIApp, exclude_paths: tuple[str, ...] | None = None) -> None:
        """
        Initialize logging middleware.

        Args:
            app: ASGI application
            exclude_paths: Path prefixes served without request logs
        """
        super().__init__(app)
        self._exclude_paths = exclude_paths if exclude_paths is not None else self.EXCLUDE_PATHS

    def _should_log(self, path: str) -> bool:
        return not any(path.startswith(exclude) for exclude in self._exclude_paths)

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:8]
        request.state.correlation_id = correlation_id

        if not self._should_log(request.url.path):
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            return response

        request_logger = logger.with_context(
            correlation_id=correlation_id,
            method=request.method,
            path=request.url.path,
        )
        start_time = time.perf_counter()
        request_logger.info(f"[{correlation_id}] --> {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            request_logger.error(
                f"[{correlation_id}] <-- {request.method} {request.url.path} ERROR in {duration_ms:.2f}ms: {e}",
                duration_ms=round(duration_ms, 2),
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        message = (
            f"[{correlation_id}] <-- {request.method} {request.url.path} "
            f"{response.status_code} in {duration_ms:.2f}ms"
        )
        if response.status_code >= 400:
            request_logger.warning(message, status_code=response.status_code, duration_ms=round(duration_ms, 2))
        else:
            request_logger.info(message, status_code=response.status_code, duration_ms=round(duration_ms, 2))

        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers["X-Response-Time-Ms"] = f"{duration_ms:.2f}"
        return response


__all__ = ["CORRELATION_HEADER", "RequestLoggingMiddleware"]
