"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite async engine/session, the seeded tutorial
fixture, and a MemberQueryService bound to the test session.
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from querylab.application.services import MemberQueryService
from querylab.boundary.db.base import Base
from querylab.boundary.db.seed import TutorialFixture, seed_tutorial_fixture

# Import all models to register them with Base.metadata
from querylab.boundary.db import models  # noqa: F401


@pytest.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with the schema created.

    StaticPool keeps the single in-memory connection alive for the
    whole test.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def test_async_db(test_engine):
    """
    Create an async session on the in-memory database.

    Yields:
        AsyncSession: Test database session, rolled back afterwards
    """
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def tutorial(test_async_db: AsyncSession) -> TutorialFixture:
    """teamA (member1, member2) and teamB (member3, member4), flushed."""
    return await seed_tutorial_fixture(test_async_db)


@pytest.fixture
def member_query_service(test_async_db: AsyncSession) -> MemberQueryService:
    """Provide MemberQueryService bound to the test session."""
    return MemberQueryService(test_async_db)
