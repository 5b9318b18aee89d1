"""
Exception handlers for FastAPI application.

Every error response shares the shape {"error": true, "message", "status_code"}
plus optional "code" and "details".
"""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.core.domain.exceptions import DomainException, EntityNotFoundException

logger = logging.getLogger(__name__)


def _error_content(
    message: Any,
    status_code: int,
    code: str | None = None,
    details: Any = None,
) -> dict[str, Any]:
    content: dict[str, Any] = {"error": True, "message": message, "status_code": status_code}
    if code:
        content["code"] = code
    if details:
        content["details"] = details
    return content


def _format_errors(errors: list[Any]) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException with consistent response format."""
    http_exc = exc if isinstance(exc, HTTPException) else HTTPException(status_code=500, detail=str(exc))
    return JSONResponse(
        status_code=http_exc.status_code,
        content=_error_content(http_exc.detail, http_exc.status_code),
        headers=http_exc.headers,
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request body/path validation errors."""
    code = status.HTTP_422_UNPROCESSABLE_ENTITY
    if not isinstance(exc, (RequestValidationError, ValidationError)):
        return JSONResponse(status_code=code, content=_error_content(str(exc), code))

    errors = _format_errors(list(exc.errors()))
    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return JSONResponse(
        status_code=code,
        content=_error_content("Validation error", code, "VALIDATION_ERROR", errors),
    )


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle domain exceptions raised outside the per-line pricing path.

    Not-found errors map to 404, everything else to 422.
    """
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    if isinstance(exc, EntityNotFoundException):
        code = status.HTTP_404_NOT_FOUND
    else:
        code = status.HTTP_422_UNPROCESSABLE_ENTITY

    logger.warning(f"Domain error on {request.method} {request.url.path}: [{exc.code}] {exc.message}")

    return JSONResponse(
        status_code=code,
        content=_error_content(exc.message, code, exc.code, exc.details),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=exc,
    )

    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=code, content=_error_content("Internal server error", code))


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
