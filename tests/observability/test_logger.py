"""
Test suite for logging configuration.

System role: Verification of centralized logging setup
"""

import logging

import pytest

from querylab.observability.logger import configure_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test runner left it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_should_install_single_stream_handler(self, restore_root_logger: logging.Logger) -> None:
        """Test repeated configuration does not stack handlers."""
        configure_logging("DEBUG")
        configure_logging("warning")

        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0], logging.StreamHandler)
        assert restore_root_logger.level == logging.WARNING

    def test_should_quiet_driver_loggers(self, restore_root_logger: logging.Logger) -> None:
        """Test aiosqlite and the pool logger are raised to WARNING."""
        configure_logging("DEBUG")

        assert logging.getLogger("aiosqlite").level == logging.WARNING
        assert logging.getLogger("sqlalchemy.pool").level == logging.WARNING
