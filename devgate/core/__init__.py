"""
Core Module - Configuration, errors and dependency injection.

Dependency providers live in ``devgate.core.dependencies`` and are imported
from there directly, since they pull in the services layer.
"""

from devgate.core.config import Settings, get_settings
from devgate.core.exceptions import (
    ErrorKind,
    GatewayError,
    InvalidInputError,
    PathNotFoundError,
    ToolUnavailableError,
    ExternalFailureError,
)

__all__ = [
    "Settings",
    "get_settings",
    "ErrorKind",
    "GatewayError",
    "InvalidInputError",
    "PathNotFoundError",
    "ToolUnavailableError",
    "ExternalFailureError",
]
