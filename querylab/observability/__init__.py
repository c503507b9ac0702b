"""
Observability module.

Provides logging configuration, safe structured-logging helpers and
correlation ID tracking for the HTTP surface.
"""

from querylab.observability.correlation import get_correlation_id
from querylab.observability.logger import configure_logging
from querylab.observability.log_utils import log_with_context, safe_log_value

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "log_with_context",
    "safe_log_value",
]
