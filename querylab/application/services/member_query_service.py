"""
Member query service.

Every public method is one worked example of SQLAlchemy's query builder
against the Member/Team schema: filtering, sorting with null ordering,
paging with a total count, aggregation, grouping, inner/outer/theta joins,
ON-clause filtering, joins without a foreign key, and fetch joins.

Dependencies: sqlalchemy, querylab.boundary.db, querylab.core.query
System role: Member/Team query use cases
"""

import logging

from sqlalchemy import and_, func, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from querylab.boundary.db.CRUD.team_crud import team_crud
from querylab.boundary.db.models import Member, Team
from querylab.core.exceptions import MemberNotFoundError, TeamNotFoundError
from querylab.core.query import (
    AgeStatistics,
    MemberTeamRow,
    QueryResults,
    TeamAverageAge,
    all_of,
    fetch,
    fetch_count,
    fetch_first,
    fetch_one,
    fetch_results,
    optional_eq,
    optional_goe,
    optional_loe,
    paginate,
    single_result,
    where_present,
)
from querylab.models.member import MemberSearchCondition
from querylab.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class MemberQueryService:
    """Member/Team query examples bound to one async session."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize member query service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def find_by_username_sql(self, username: str) -> Member | None:
        """
        Find a member with a hand-written SQL string.

        The query text is mapped back onto Member; the username is still
        sent as a bound parameter.

        Raises:
            NonUniqueResultError: If more than one member has the username
        """
        stmt = select(Member).from_statement(
            text("SELECT * FROM members WHERE username = :username").bindparams(
                username=username
            )
        )
        result = await self.db.scalars(stmt)
        return single_result(result.all())

    async def find_by_username(self, username: str) -> Member | None:
        """
        Find a member with the query builder.

        Raises:
            NonUniqueResultError: If more than one member has the username
        """
        stmt = select(Member).where(Member.username == username)
        return await fetch_one(self.db, stmt)

    async def search(self, username: str, age: int) -> Member | None:
        """Find the member matching both username and age (explicit AND)."""
        stmt = select(Member).where(
            and_(Member.username == username, Member.age == age)
        )
        return await fetch_one(self.db, stmt)

    async def search_by_params(
        self,
        username: str | None = None,
        age: int | None = None,
    ) -> Member | None:
        """
        Find a single member from separately passed conditions.

        Conditions whose value is None are dropped, so passing only a
        username searches by username alone.

        Raises:
            NonUniqueResultError: If the remaining conditions match several members
        """
        condition = all_of(
            optional_eq(Member.username, username),
            optional_eq(Member.age, age),
        )
        stmt = select(Member)
        if condition is not None:
            stmt = stmt.where(condition)
        return await fetch_one(self.db, stmt)

    async def get_member_with_team(self, member_id: int) -> Member:
        """
        Load a member and its team in one query.

        Raises:
            MemberNotFoundError: If no member has the ID
        """
        stmt = (
            select(Member)
            .outerjoin(Member.team)
            .options(contains_eager(Member.team))
            .where(Member.id == member_id)
        )
        member = await fetch_one(self.db, stmt)
        if member is None:
            raise MemberNotFoundError(member_id)
        return member

    async def list_members(self) -> list[Member]:
        """All members in ID order, empty list when there are none."""
        return await fetch(self.db, select(Member).order_by(Member.id))

    async def first_member(self) -> Member | None:
        """The member with the lowest ID, or None."""
        return await fetch_first(self.db, select(Member).order_by(Member.id))

    async def members_with_total(self) -> QueryResults[Member]:
        """All members plus their count, fetched with two queries."""
        return await fetch_results(self.db, select(Member).order_by(Member.id))

    async def count_members(self) -> int:
        """Number of members."""
        return await fetch_count(self.db, select(Member))

    async def sorted_by_age_and_username(
        self,
        age: int,
        nulls_first: bool = False,
    ) -> list[Member]:
        """
        Members of the given age, age descending then username ascending.

        Members without a username go last unless ``nulls_first`` is set.
        """
        username_order = Member.username.asc()
        username_order = username_order.nulls_first() if nulls_first else username_order.nulls_last()
        stmt = (
            select(Member)
            .where(Member.age == age)
            .order_by(Member.age.desc(), username_order)
        )
        return await fetch(self.db, stmt)

    async def page_by_username_desc(self, offset: int, limit: int) -> list[Member]:
        """
        One page of members ordered by username descending.

        Raises:
            ValidationError: If offset or limit are out of range
        """
        stmt = select(Member).order_by(Member.username.desc())
        return await fetch(self.db, paginate(stmt, offset, limit))

    async def page_by_username_desc_with_total(
        self,
        offset: int,
        limit: int,
    ) -> QueryResults[Member]:
        """
        Same page as ``page_by_username_desc`` plus the total member count.

        Raises:
            ValidationError: If offset or limit are out of range
        """
        stmt = select(Member).order_by(Member.username.desc())
        return await fetch_results(self.db, stmt, offset=offset, limit=limit)

    async def age_statistics(self) -> AgeStatistics:
        """
        Count, sum, average, maximum and minimum of member ages in one row.

        On an empty table the count is 0 and every other aggregate is None.
        """
        stmt = select(
            func.count(Member.id).label("member_count"),
            func.sum(Member.age).label("age_sum"),
            func.avg(Member.age).label("age_avg"),
            func.max(Member.age).label("age_max"),
            func.min(Member.age).label("age_min"),
        )
        row = await fetch_one(self.db, stmt)
        return AgeStatistics(
            member_count=row.member_count,
            age_sum=row.age_sum,
            age_avg=float(row.age_avg) if row.age_avg is not None else None,
            age_max=row.age_max,
            age_min=row.age_min,
        )

    async def average_age_by_team(self) -> list[TeamAverageAge]:
        """Average member age per team, ordered by team name."""
        stmt = (
            select(Team.name, func.avg(Member.age).label("average_age"))
            .select_from(Member)
            .join(Member.team)
            .group_by(Team.name)
            .order_by(Team.name)
        )
        rows = await fetch(self.db, stmt)
        return [TeamAverageAge(team_name=row.name, average_age=float(row.average_age)) for row in rows]

    async def members_of_team(self, team_name: str) -> list[Member]:
        """Members of the named team (inner join along Member.team)."""
        stmt = (
            select(Member)
            .join(Member.team)
            .where(Team.name == team_name)
            .order_by(Member.id)
        )
        return await fetch(self.db, stmt)

    async def members_of_existing_team(self, team_name: str) -> list[Member]:
        """
        Members of the named team, insisting that the team exists.

        Raises:
            TeamNotFoundError: If no team has the name
        """
        if await team_crud.get_by_name(self.db, team_name) is None:
            raise TeamNotFoundError(team_name)
        return await self.members_of_team(team_name)

    async def members_named_after_teams(self) -> list[Member]:
        """
        Members whose username equals some team's name.

        Theta join: both tables in FROM, matched only by the WHERE
        predicate, no foreign key involved. Inner semantics only.
        """
        stmt = (
            select(Member)
            .select_from(Member, Team)
            .where(Member.username == Team.name)
            .order_by(Member.id)
        )
        return await fetch(self.db, stmt)

    async def members_with_team_named(
        self,
        team_name: str,
    ) -> list[tuple[Member, Team | None]]:
        """
        Every member, paired with its team only if the team has the given name.

        The name filter sits in the ON clause of a left outer join, so
        members of other teams are kept with ``None`` in place of the team.
        """
        stmt = (
            select(Member, Team)
            .outerjoin(Member.team.and_(Team.name == team_name))
            .order_by(Member.id)
        )
        rows = await fetch(self.db, stmt)
        return [(row.Member, row.Team) for row in rows]

    async def members_with_matching_team_name(self) -> list[tuple[Member, Team | None]]:
        """
        Every member, paired with the team whose name equals the username.

        Left outer join on an arbitrary predicate instead of the foreign key.
        """
        stmt = (
            select(Member, Team)
            .outerjoin(Team, Member.username == Team.name)
            .order_by(Member.id)
        )
        rows = await fetch(self.db, stmt)
        return [(row.Member, row.Team) for row in rows]

    async def find_with_team(self, username: str) -> Member | None:
        """
        Find a member and populate its team from the same SELECT (fetch join).

        Raises:
            NonUniqueResultError: If more than one member has the username
        """
        stmt = (
            select(Member)
            .join(Member.team)
            .options(contains_eager(Member.team))
            .where(Member.username == username)
        )
        return await fetch_one(self.db, stmt)

    async def search_member_teams(
        self,
        condition: MemberSearchCondition,
        offset: int | None = None,
        limit: int | None = None,
    ) -> QueryResults[MemberTeamRow]:
        """
        Search members with optional filters and return member+team rows.

        Absent filters are skipped; members without a team are included
        unless a team name is requested.

        Args:
            condition: Optional username/team/age filters
            offset: Rows to skip
            limit: Page size

        Returns:
            QueryResults[MemberTeamRow]: Page of flat rows and the total count

        Raises:
            ValidationError: If offset or limit are out of range
        """
        stmt = (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Member.team)
        )
        stmt = where_present(
            stmt,
            optional_eq(Member.username, condition.username),
            optional_eq(Team.name, condition.team_name),
            optional_goe(Member.age, condition.age_goe),
            optional_loe(Member.age, condition.age_loe),
        ).order_by(Member.id)

        try:
            page = await fetch_results(self.db, stmt, offset=offset, limit=limit)
        except Exception as e:
            log_with_context(
                logger,
                logging.ERROR,
                "Member search failed",
                error=e,
                condition=condition.model_dump(exclude_none=True),
            )
            raise

        logger.info(
            "Member search",
            extra={"total": page.total, "offset": offset, "limit": limit},
        )
        return QueryResults(
            results=[MemberTeamRow(**row._asdict()) for row in page.results],
            total=page.total,
            offset=page.offset,
            limit=page.limit,
        )
