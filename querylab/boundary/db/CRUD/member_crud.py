"""
Member CRUD operations.

Provides Create, Read, Update, Delete operations for Member
with member-specific query methods.

Dependencies: sqlalchemy, querylab.boundary.db.models
System role: Member persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from querylab.boundary.db.models.member_model import Member
from querylab.boundary.db.CRUD.base_crud import BaseCRUD


class MemberCRUD(BaseCRUD[Member]):
    """
    CRUD operations for Member.

    Extends BaseCRUD with lookups by username and team.
    """

    def __init__(self) -> None:
        """Initialize MemberCRUD with Member."""
        super().__init__(Member)

    async def get_by_username(
        self,
        session: AsyncSession,
        username: str,
    ) -> Sequence[Member]:
        """
        Retrieve members with the given username, oldest row first.

        Usernames are not unique, so this returns every match.

        Args:
            session: Async database session
            username: Exact username

        Returns:
            Sequence of matching members
        """
        stmt = select(Member).where(Member.username == username).order_by(Member.id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_team(
        self,
        session: AsyncSession,
        team_id: int,
    ) -> Sequence[Member]:
        """
        Retrieve the members of a team.

        Args:
            session: Async database session
            team_id: Team primary key

        Returns:
            Sequence of members in primary-key order
        """
        stmt = select(Member).where(Member.team_id == team_id).order_by(Member.id)
        result = await session.execute(stmt)
        return result.scalars().all()


member_crud = MemberCRUD()
