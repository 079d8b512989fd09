"""
Error Handler Middleware - Global exception handling for the API.

Catches exceptions and returns the gateway's JSON error envelope:

    {"status": "error", "message": "..."}

``GatewayError.kind`` is the only thing that decides the HTTP status.
"""

import logging
import traceback

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any, Dict, Optional

from devgate.core.config import get_settings
from devgate.core.exceptions import ErrorKind, GatewayError, STATUS_CODES


logger = logging.getLogger(__name__)


def create_error_response(
    message: str,
    status_code: int = 500,
    extra: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    """Create a standardized error response."""
    content: Dict[str, Any] = {
        "status": "error",
        "message": message,
    }
    if extra:
        content.update(extra)

    return JSONResponse(
        status_code=status_code,
        content=content
    )


async def gateway_exception_handler(
    request: Request,
    exc: GatewayError
) -> JSONResponse:
    """Handle failures raised by the services layer."""
    if exc.kind == ErrorKind.EXTERNAL_FAILURE:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return create_error_response(
        message=exc.message,
        status_code=exc.status_code,
        extra=exc.details
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions (unknown routes, wrong methods)."""
    return create_error_response(
        message=str(exc.detail),
        status_code=exc.status_code
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Reject malformed request bodies with 400 before any service call."""
    errors = []
    for error in exc.errors():
        loc = " -> ".join(str(l) for l in error["loc"] if l != "body")
        errors.append(f"{loc}: {error['msg']}" if loc else error["msg"])

    return create_error_response(
        message=f"Invalid request: {'; '.join(errors)}",
        status_code=STATUS_CODES[ErrorKind.INVALID_INPUT],
    )


async def generic_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    settings = get_settings()

    logger.exception("Unexpected error handling %s %s", request.method, request.url.path)

    extra = None
    if settings.debug:
        extra = {
            "exception_type": type(exc).__name__,
            "traceback": traceback.format_exc()
        }

    return create_error_response(
        message="An unexpected error occurred",
        status_code=500,
        extra=extra
    )
