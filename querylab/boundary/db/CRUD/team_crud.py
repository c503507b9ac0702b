"""
Team CRUD operations.

Provides Create, Read, Update, Delete operations for Team
with team-specific query methods.

Dependencies: sqlalchemy, querylab.boundary.db.models
System role: Team persistence operations
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from querylab.boundary.db.models.team_model import Team
from querylab.boundary.db.CRUD.base_crud import BaseCRUD


class TeamCRUD(BaseCRUD[Team]):
    """
    CRUD operations for Team.

    Extends BaseCRUD with lookup by name and eager loading of members.
    """

    def __init__(self) -> None:
        """Initialize TeamCRUD with Team."""
        super().__init__(Team)

    async def get_by_name(self, session: AsyncSession, name: str) -> Team | None:
        """
        Retrieve the first team with the given name.

        Args:
            session: Async database session
            name: Team name

        Returns:
            Team if found, None otherwise
        """
        stmt = select(Team).where(Team.name == name).order_by(Team.id).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_members(self, session: AsyncSession, id: int) -> Team | None:
        """
        Retrieve team with eagerly loaded members.

        Args:
            session: Async database session
            id: Team primary key

        Returns:
            Team with members loaded, None if not found
        """
        stmt = (
            select(Team)
            .where(Team.id == id)
            .options(selectinload(Team.members))
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()


team_crud = TeamCRUD()
