"""
Optional predicates for dynamic WHERE clauses.

Each ``optional_*`` builder returns ``None`` when its value is absent, and
``where_present`` drops ``None`` entries, so a search form with blank
fields turns into a WHERE clause with only the fields that were filled in.

Dependencies: sqlalchemy
System role: Dynamic predicate assembly for select statements
"""

from typing import Any

from sqlalchemy import Select, and_
from sqlalchemy.sql.elements import ColumnElement


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def optional_eq(column: Any, value: Any) -> ColumnElement[bool] | None:
    """``column = value`` or None when value is absent (None or blank)."""
    return None if _is_absent(value) else column == value


def optional_goe(column: Any, value: Any) -> ColumnElement[bool] | None:
    """``column >= value`` or None when value is None."""
    return None if value is None else column >= value


def optional_loe(column: Any, value: Any) -> ColumnElement[bool] | None:
    """``column <= value`` or None when value is None."""
    return None if value is None else column <= value


def all_of(*conditions: ColumnElement[bool] | None) -> ColumnElement[bool] | None:
    """
    AND together the conditions that are present.

    Returns:
        The conjunction, the single remaining condition, or None if all were absent
    """
    present = [c for c in conditions if c is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return and_(*present)


def where_present(stmt: Select, *conditions: ColumnElement[bool] | None) -> Select:
    """
    Apply the present conditions to a select statement.

    Args:
        stmt: Select statement
        *conditions: Predicates, None entries are ignored

    Returns:
        Select: Statement with an AND-ed WHERE clause, unchanged if nothing was present
    """
    present = [c for c in conditions if c is not None]
    if present:
        stmt = stmt.where(*present)
    return stmt
