"""
Result-shape helpers for SQLAlchemy select statements.

A select statement says *what* to query; these helpers say *how many* rows
come back and in what form:

    fetch         every row (empty list when none)
    fetch_one     a single row or None; more than one is an error
    fetch_first   the first row or None (LIMIT 1)
    fetch_count   row count of the statement, ignoring order/offset/limit
    fetch_results a page of rows plus the total count (two queries)

Statements that select exactly one entity or expression return scalars;
multi-column statements return ``Row`` tuples.

Dependencies: sqlalchemy
System role: Query execution vocabulary shared by services and tests
"""

import logging
from typing import Any, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from querylab.core.exceptions import NonUniqueResultError, ValidationError
from querylab.core.query.results import QueryResults

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_scalar(stmt: Select) -> bool:
    return len(stmt.column_descriptions) == 1


def single_result(items: Sequence[T]) -> T | None:
    """
    Reduce a result list to at most one item.

    Raises:
        NonUniqueResultError: If more than one item is present
    """
    if len(items) > 1:
        raise NonUniqueResultError(len(items))
    return items[0] if items else None


def paginate(stmt: Select, offset: int | None, limit: int | None) -> Select:
    """
    Apply offset/limit to a select statement.

    Args:
        stmt: Select statement
        offset: Number of rows to skip (None leaves it unset)
        limit: Maximum number of rows (None leaves it unset)

    Returns:
        Select: Paged statement

    Raises:
        ValidationError: If offset is negative or limit is not positive
    """
    if offset is not None:
        if offset < 0:
            raise ValidationError("offset must not be negative", field="offset")
        stmt = stmt.offset(offset)
    if limit is not None:
        if limit < 1:
            raise ValidationError("limit must be positive", field="limit")
        stmt = stmt.limit(limit)
    return stmt


async def fetch(session: AsyncSession, stmt: Select) -> list[Any]:
    """Execute the statement and return every row."""
    result = await session.execute(stmt)
    if _is_scalar(stmt):
        return list(result.scalars().all())
    return list(result.all())


async def fetch_one(session: AsyncSession, stmt: Select) -> Any | None:
    """
    Execute the statement expecting zero or one row.

    Raises:
        NonUniqueResultError: If the statement matched more than one row
    """
    return single_result(await fetch(session, stmt))


async def fetch_first(session: AsyncSession, stmt: Select) -> Any | None:
    """Execute the statement with LIMIT 1 and return the row or None."""
    rows = await fetch(session, stmt.limit(1))
    return rows[0] if rows else None


async def fetch_count(session: AsyncSession, stmt: Select) -> int:
    """
    Count the rows the statement would return.

    Ordering and paging are stripped before counting, so the count is the
    total a paged UI needs.
    """
    unpaged = stmt.order_by(None).limit(None).offset(None)
    count_stmt = select(func.count()).select_from(unpaged.subquery())
    result = await session.execute(count_stmt)
    return result.scalar_one()


async def fetch_results(
    session: AsyncSession,
    stmt: Select,
    offset: int | None = None,
    limit: int | None = None,
) -> QueryResults[Any]:
    """
    Fetch one page of the statement together with its total row count.

    The content query is skipped when the count is zero.

    Args:
        session: Async database session
        stmt: Unpaged select statement (ordering is kept for the page)
        offset: Rows to skip
        limit: Page size

    Returns:
        QueryResults: Page rows, total, offset and limit

    Raises:
        ValidationError: If offset or limit are out of range
    """
    paged = paginate(stmt, offset, limit)
    total = await fetch_count(session, stmt)
    results = await fetch(session, paged) if total else []
    logger.debug(
        "Fetched page",
        extra={"total": total, "offset": offset, "limit": limit, "rows": len(results)},
    )
    return QueryResults(results=results, total=total, offset=offset, limit=limit)
