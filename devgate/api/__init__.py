"""
API Layer - FastAPI routes and middleware.
"""

from devgate.api.routes import (
    health_router,
    files_router,
    python_router,
    github_router,
)

__all__ = [
    "health_router",
    "files_router",
    "python_router",
    "github_router",
]
