"""
Correlation ID context.

The current request's correlation ID lives in a ContextVar, so it follows
the request through awaits and tasks without being passed around.
CorrelationMiddleware sets it from the X-Correlation-ID header.

Dependencies: contextvars, uuid
System role: Request tracing across service boundaries
"""

import uuid
from contextvars import ContextVar

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Store the correlation ID for the current context.

    Args:
        correlation_id: Incoming ID; a new UUID4 is generated when empty

    Returns:
        str: The ID now in effect
    """
    value = correlation_id or str(uuid.uuid4())
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    """Correlation ID of the current context ("" outside a request)."""
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    correlation_id_ctx.set("")
