"""
Database configuration settings.

Connection parameters for the async SQLAlchemy engine. The default URL points
at a local SQLite file through the aiosqlite driver so the walkthrough runs
without a database server.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from querylab.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Database engine configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="sqlite+aiosqlite:///./querylab.db",
        description="Async SQLAlchemy database URL",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")

    @property
    def is_sqlite(self) -> bool:
        """True when the configured backend is SQLite."""
        return self.url.startswith("sqlite")
