"""
Persistence-state helpers.

Dependencies: sqlalchemy
System role: Inspection of ORM instance loading state
"""

from sqlalchemy import inspect

from querylab.boundary.db.base import Base


def is_loaded(instance: Base, attribute: str) -> bool:
    """
    Report whether an attribute of a persistent instance is already loaded.

    A lazy relationship that has not been touched, or an attribute expired
    by the session, is reported as not loaded; reading it would emit SQL.

    Args:
        instance: Mapped ORM instance
        attribute: Mapped attribute name (column or relationship)

    Returns:
        bool: True if reading the attribute needs no database round trip

    Raises:
        AttributeError: If the attribute is not mapped on the instance's class
    """
    state = inspect(instance)
    if attribute not in state.mapper.attrs:
        raise AttributeError(
            f"{type(instance).__name__} has no mapped attribute '{attribute}'"
        )
    return attribute not in state.unloaded
