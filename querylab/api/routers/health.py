"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: querylab.boundary, querylab.configs
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from querylab.api.deps.dependencies import get_settings_dependency
from querylab.boundary.db import get_async_db
from querylab.configs import Settings

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    environment: str | None = None


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse, response_model_exclude_none=True)
async def health_check(
    settings: Settings = Depends(get_settings_dependency),
) -> HealthResponse:
    """Basic health check, reporting the configured environment."""
    return HealthResponse(
        status="healthy",
        message="Server Healthy",
        environment=settings.environment,
    )


@router.get("/db", response_model=HealthResponse, response_model_exclude_none=True)
async def health_check_db(db: AsyncSession = Depends(get_async_db)) -> HealthResponse:
    """Database health check (runs SELECT 1)."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        return HealthResponse(status="unhealthy", message="Database connection failed")
    return HealthResponse(status="healthy", message="Database connection OK")
