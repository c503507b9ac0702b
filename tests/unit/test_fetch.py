"""
Test suite for the result-shape helpers.

Uses a mocked AsyncSession to check how each helper executes statements
and reshapes results, without a database.

System role: Verification of core query execution vocabulary
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from querylab.boundary.db.models import Member, Team
from querylab.core.exceptions import NonUniqueResultError, ValidationError
from querylab.core.query import (
    fetch,
    fetch_count,
    fetch_first,
    fetch_one,
    fetch_results,
    paginate,
    single_result,
)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


def _scalar_result(items: list) -> MagicMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = items
    return result


class TestSingleResult:
    """Test suite for single_result()."""

    def test_empty_should_return_none(self) -> None:
        """Test no items means None."""
        assert single_result([]) is None

    def test_one_item_should_be_returned(self) -> None:
        """Test a single item is unwrapped."""
        assert single_result(["member1"]) == "member1"

    def test_many_items_should_raise_with_count(self) -> None:
        """Test more than one item is an error carrying the count."""
        with pytest.raises(NonUniqueResultError) as exc_info:
            single_result(["member1", "member2", "member3"])

        assert exc_info.value.details["count"] == 3


class TestPaginate:
    """Test suite for paginate()."""

    def test_none_bounds_should_leave_statement_unpaged(self) -> None:
        """Test offset/limit of None add nothing."""
        stmt = paginate(select(Member), None, None)

        assert "LIMIT" not in str(stmt)
        assert "OFFSET" not in str(stmt)

    def test_bounds_should_be_applied(self) -> None:
        """Test offset and limit end up on the statement."""
        stmt = paginate(select(Member), 1, 2)

        assert stmt._offset == 1
        assert stmt._limit == 2

    def test_zero_offset_should_be_allowed(self) -> None:
        """Test offset 0 is valid."""
        assert paginate(select(Member), 0, 5)._offset == 0

    @pytest.mark.parametrize(
        ("offset", "limit", "field"),
        [(-1, None, "offset"), (None, 0, "limit"), (0, -3, "limit")],
    )
    def test_invalid_bounds_should_raise(self, offset, limit, field: str) -> None:
        """Test negative offsets and non-positive limits are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            paginate(select(Member), offset, limit)

        assert exc_info.value.details["field"] == field


class TestFetch:
    """Test suite for fetch(), fetch_one() and fetch_first()."""

    @pytest.mark.asyncio
    async def test_entity_statement_should_return_scalars(
        self, mock_session: AsyncSession
    ) -> None:
        """Test a single-entity select is unwrapped to entities."""
        # Arrange
        members = [MagicMock(), MagicMock()]
        mock_session.execute = AsyncMock(return_value=_scalar_result(members))

        # Act
        result = await fetch(mock_session, select(Member))

        # Assert
        assert result == members

    @pytest.mark.asyncio
    async def test_multi_column_statement_should_return_rows(
        self, mock_session: AsyncSession
    ) -> None:
        """Test a select of several entities keeps the row tuples."""
        # Arrange
        rows = [("member1", "teamA")]
        mock_result = MagicMock()
        mock_result.all.return_value = rows
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        result = await fetch(mock_session, select(Member, Team))

        # Assert
        assert result == rows
        mock_result.scalars.assert_not_called()

    @pytest.mark.asyncio
    async def test_fetch_one_should_raise_on_several_rows(
        self, mock_session: AsyncSession
    ) -> None:
        """Test fetch_one rejects more than one row."""
        mock_session.execute = AsyncMock(return_value=_scalar_result([1, 2]))

        with pytest.raises(NonUniqueResultError):
            await fetch_one(mock_session, select(Member))

    @pytest.mark.asyncio
    async def test_fetch_first_should_limit_to_one(
        self, mock_session: AsyncSession
    ) -> None:
        """Test fetch_first executes with LIMIT 1."""
        # Arrange
        member = MagicMock()
        mock_session.execute = AsyncMock(return_value=_scalar_result([member]))

        # Act
        result = await fetch_first(mock_session, select(Member))

        # Assert
        assert result is member
        assert mock_session.execute.call_args.args[0]._limit == 1


class TestFetchCountAndResults:
    """Test suite for fetch_count() and fetch_results()."""

    @pytest.mark.asyncio
    async def test_count_should_strip_order_and_paging(
        self, mock_session: AsyncSession
    ) -> None:
        """Test the count query wraps an unordered, unpaged subquery."""
        # Arrange
        mock_result = MagicMock()
        mock_result.scalar_one.return_value = 4
        mock_session.execute = AsyncMock(return_value=mock_result)
        stmt = select(Member).order_by(Member.username.desc()).offset(1).limit(2)

        # Act
        total = await fetch_count(mock_session, stmt)

        # Assert
        assert total == 4
        sql = str(mock_session.execute.call_args.args[0])
        assert sql.startswith("SELECT count(*)")
        assert "ORDER BY" not in sql
        assert "LIMIT" not in sql

    @pytest.mark.asyncio
    async def test_results_should_skip_content_query_when_empty(
        self, mock_session: AsyncSession
    ) -> None:
        """Test a zero total issues only the count query."""
        # Arrange
        mock_result = MagicMock()
        mock_result.scalar_one.return_value = 0
        mock_session.execute = AsyncMock(return_value=mock_result)

        # Act
        results = await fetch_results(mock_session, select(Member), offset=0, limit=10)

        # Assert
        assert results.is_empty
        assert results.total == 0
        assert results.results == []
        mock_session.execute.assert_called_once()

    @pytest.mark.asyncio
    async def test_results_should_validate_before_querying(
        self, mock_session: AsyncSession
    ) -> None:
        """Test invalid paging fails without touching the database."""
        with pytest.raises(ValidationError):
            await fetch_results(mock_session, select(Member), offset=-1, limit=10)

        mock_session.execute.assert_not_called()
