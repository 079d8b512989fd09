"""
API Routes - FastAPI route modules, one per capability group.
"""

from devgate.api.routes.health import router as health_router
from devgate.api.routes.files import router as files_router
from devgate.api.routes.python import router as python_router
from devgate.api.routes.github import router as github_router

__all__ = [
    "health_router",
    "files_router",
    "python_router",
    "github_router",
]
