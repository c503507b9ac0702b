"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata and,
unless disabled, seeds the tutorial fixture.

Dependencies: sqlalchemy, querylab.configs
System role: Database schema initialization

Usage:
    python -m querylab.boundary.db.create_tables
    python -m querylab.boundary.db.create_tables --drop --no-seed
"""

import argparse
import asyncio
import logging

from querylab.boundary.db.base import Base
from querylab.boundary.db.connection import (
    dispose_engine,
    get_async_engine,
    get_async_session_factory,
)
from querylab.boundary.db.seed import seed_tutorial_fixture
from querylab.configs import get_settings
from querylab.observability.logger import configure_logging

# Import all models to register them with Base.metadata
from querylab.boundary.db.models import Member, Team  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables() -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Tables dropped")


async def init_database(drop: bool = False, seed: bool = True) -> None:
    """
    Create the schema and optionally load the tutorial fixture.

    Args:
        drop: Drop existing tables first
        seed: Insert the tutorial teams and members
    """
    try:
        if drop:
            await drop_all_tables()
        await create_all_tables()
        if seed:
            async with get_async_session_factory()() as session:
                async with session.begin():
                    await seed_tutorial_fixture(session)
    finally:
        await dispose_engine()


def main(argv: list[str] | None = None) -> None:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Create the querylab schema.")
    parser.add_argument("--drop", action="store_true", help="drop tables before creating them")
    parser.add_argument(
        "--no-seed",
        dest="seed",
        action="store_false",
        default=None,
        help="skip inserting the tutorial fixture",
    )
    args = parser.parse_args(argv)

    configure_logging()
    seed = get_settings().seed_fixture if args.seed is None else args.seed
    asyncio.run(init_database(drop=args.drop, seed=seed))


if __name__ == "__main__":
    main()
