"""
Generic CRUD operations keyed by integer primary key.

TeamCRUD and MemberCRUD inherit these and add their own lookups. Every
method works inside the caller's session and transaction: writes are
flushed, never committed.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Generic, Sequence, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from querylab.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    CRUD operations for one mapped class with an integer ``id`` column.

    Attributes:
        model: Mapped class the statements target
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Construct an instance, add it and flush it.

        Args:
            session: Async database session
            **kwargs: Constructor arguments (Member also accepts ``team``)

        Returns:
            The instance, refreshed so ``id`` and timestamps are populated
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: int) -> ModelT | None:
        """Row with the primary key, or None."""
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Rows in primary-key order.

        Args:
            session: Async database session
            limit: Page size, None for every row
            offset: Rows to skip
        """
        stmt = select(self.model).order_by(self.model.id)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count(self, session: AsyncSession) -> int:
        stmt = select(func.count()).select_from(self.model)
        result = await session.execute(stmt)
        return result.scalar_one()

    async def update_by_id(
        self,
        session: AsyncSession,
        id: int,
        **values,
    ) -> ModelT | None:
        """
        UPDATE ... RETURNING for one row.

        Instances of the row already in the session are synchronised.

        Returns:
            The updated instance, or None when no row has the key
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**values)
            .returning(self.model)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_by_id(self, session: AsyncSession, id: int) -> bool:
        """DELETE one row; True if a row was removed."""
        stmt = delete(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: int) -> bool:
        stmt = select(self.model.id).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None
