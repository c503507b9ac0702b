"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from querylab.configs.base import BaseSettings
from querylab.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    # Seed the tutorial fixture when the schema bootstrap script runs
    seed_fixture: bool = Field(
        default=True,
        description="Insert teamA/teamB and member1..member4 after creating tables",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from querylab.configs import get_settings
        settings = get_settings()
    """
    return Settings()
