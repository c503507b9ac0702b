"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, querylab.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from querylab import __version__
from querylab.boundary.db import dispose_engine
from querylab.observability.logger import configure_logging
from querylab.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import health_router, members_router, teams_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and releases the engine's pooled
    connections on shutdown.
    """
    configure_logging()
    logger = logging.getLogger("uvicorn")
    logger.info("querylab API starting")

    yield

    await dispose_engine()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="querylab API",
        description="Member/Team queries built with SQLAlchemy",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(members_router, prefix="/api/v1")
    app.include_router(teams_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "querylab.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
