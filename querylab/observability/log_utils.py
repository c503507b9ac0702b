"""
Structured logging helpers.

Log records carry query context (conditions, paging, row counts) in
``extra``. Values are rendered here so that ORM instances, statements and
large collections never blow up or flood a log line.

Dependencies: logging (stdlib), sqlalchemy, pydantic
System role: Logging helper functions
"""

import logging
from typing import Any

from pydantic import BaseModel
from sqlalchemy.sql import ClauseElement

MAX_LOG_VALUE_LENGTH = 500


def _render(value: Any) -> str:
    if value is None:
        return "None"
    if isinstance(value, str):
        return value
    if isinstance(value, BaseModel):
        return str(value.model_dump(exclude_none=True))
    if isinstance(value, ClauseElement):
        # Bound values stay as placeholders
        return " ".join(str(value).split())
    if isinstance(value, (list, tuple, set)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    return str(value)


def safe_log_value(value: Any, max_length: int = MAX_LOG_VALUE_LENGTH) -> str:
    """
    Render a value for a log record.

    Collections are summarised by size, pydantic models by their non-empty
    fields, SQL expressions by their SQL text. Anything whose ``__str__``
    fails is reported by type instead of raising.

    Args:
        value: Value to render
        max_length: Longer renderings are cut and annotated

    Returns:
        str: Printable representation
    """
    try:
        rendered = _render(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"

    if len(rendered) > max_length:
        return f"{rendered[:max_length]}... (truncated, {len(rendered)} total)"
    return rendered


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Emit ``message`` with every keyword rendered through safe_log_value.

    Args:
        logger: Target logger
        level: logging level constant
        message: Log message
        **context: Fields attached to the record as ``extra``
    """
    logger.log(
        level,
        message,
        extra={key: safe_log_value(value) for key, value in context.items()},
    )
