"""
Dependency factories.

Factory functions for FastAPI dependencies.

Dependencies: querylab.configs, querylab.application, querylab.boundary
System role: Service wiring for request handlers
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from querylab.application.services import MemberQueryService
from querylab.boundary.db import get_async_db
from querylab.configs import Settings, get_settings


def get_settings_dependency() -> Settings:
    """Application settings for request handlers."""
    return get_settings()


def get_member_query_service(
    db: AsyncSession = Depends(get_async_db),
) -> MemberQueryService:
    """
    Create MemberQueryService bound to the request's session.

    Args:
        db: Request-scoped async session

    Returns:
        MemberQueryService: Service instance
    """
    return MemberQueryService(db=db)
