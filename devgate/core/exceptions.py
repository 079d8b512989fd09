"""
Gateway Exceptions - The single error vocabulary shared by every facade.

Services raise these; the API layer maps ``ErrorKind`` to an HTTP status
exactly once (see ``devgate.api.middleware.error_handler``).
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Category of a failed operation."""
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    UNAVAILABLE = "unavailable"
    EXTERNAL_FAILURE = "external_failure"


STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNAVAILABLE: 404,
    ErrorKind.EXTERNAL_FAILURE: 500,
}


class GatewayError(Exception):
    """Base exception for operation failures surfaced to the caller."""

    kind: ErrorKind = ErrorKind.EXTERNAL_FAILURE

    def __init__(
        self,
        message: str,
        kind: Optional[ErrorKind] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        if kind is not None:
            self.kind = kind
        self.details = details or {}
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


class InvalidInputError(GatewayError):
    """Raised when a request names the wrong kind of path or a bad pattern."""

    kind = ErrorKind.INVALID_INPUT


class PathNotFoundError(GatewayError):
    """Raised when a file or directory does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class ToolUnavailableError(GatewayError):
    """Raised when a required external executable is not installed."""

    kind = ErrorKind.UNAVAILABLE

    def __init__(self, message: str):
        super().__init__(message, details={"installed": False})


class ExternalFailureError(GatewayError):
    """Raised when a subprocess, remote API or OS call fails."""

    kind = ErrorKind.EXTERNAL_FAILURE
