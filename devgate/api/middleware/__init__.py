"""
API Middleware - Request/response processing middleware.
"""

from devgate.api.middleware.error_handler import (
    create_error_response,
    gateway_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler,
)

__all__ = [
    "create_error_response",
    "gateway_exception_handler",
    "http_exception_handler",
    "validation_exception_handler",
    "generic_exception_handler",
]
