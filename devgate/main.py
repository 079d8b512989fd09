"""
devgate - FastAPI Application Entry Point

Local HTTP gateway exposing pyright analysis, GitHub repository operations
and filesystem access as JSON endpoints.

Usage:
    devgate start

Or:
    python -m uvicorn devgate.main:app --host 127.0.0.1 --port 3333
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from devgate.core.config import get_settings
from devgate.core.exceptions import GatewayError
from devgate.api.routes import health_router, files_router, python_router, github_router
from devgate.api.middleware.error_handler import (
    gateway_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler,
)


logger = logging.getLogger("devgate")


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr in the gateway's format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    if not settings.github_token:
        logger.warning("GITHUB_TOKEN is not set; GitHub endpoints will fail")
    yield
    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
## devgate

Local gateway for a coding agent.

### Endpoint groups
- **Python**: run pyright, apply literal text fixes
- **GitHub**: list repositories, read/write contents, open pull requests
- **Files**: list, read, write and search the local filesystem
        """,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(GatewayError, gateway_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Register routers
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(python_router, prefix=settings.api_prefix)
    app.include_router(github_router, prefix=settings.api_prefix)
    app.include_router(files_router, prefix=settings.api_prefix)

    @app.get("/", tags=["Root"])
    async def root():
        """Service information and endpoint index."""
        prefix = settings.api_prefix
        return {
            "message": settings.app_name,
            "status": "running",
            "version": settings.app_version,
            "endpoints": {
                "python": [
                    f"{prefix}/python/check",
                    f"{prefix}/python/analyze",
                    f"{prefix}/python/fix",
                ],
                "github": [
                    f"{prefix}/github/repos",
                    f"{prefix}/github/content",
                    f"{prefix}/github/update",
                    f"{prefix}/github/pr",
                ],
                "files": [
                    f"{prefix}/files/list",
                    f"{prefix}/files/read",
                    f"{prefix}/files/write",
                    f"{prefix}/files/search",
                ],
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "devgate.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
