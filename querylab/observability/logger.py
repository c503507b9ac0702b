"""
Logger configuration.

Provides configured root logger with a timestamped format.

Dependencies: logging (stdlib), querylab.configs
System role: Centralized logging configuration
"""

import logging
import sys

from querylab.configs import get_settings


def configure_logging(level: str | None = None) -> None:
    """
    Configure Python logging with ISO timestamp and structured format.

    Args:
        level: Root log level; falls back to the LOG_LEVEL setting
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root_logger.setLevel((level or get_settings().log_level).upper())
    root_logger.addHandler(handler)

    # Reduce noise from verbose third-party libraries
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    if get_settings().database.echo_sql:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

