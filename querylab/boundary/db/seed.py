"""
Tutorial fixture data.

Two teams and four members that every query example is written against:

    teamA: member1 (10), member2 (20)
    teamB: member3 (30), member4 (40)

Dependencies: sqlalchemy, querylab.boundary.db.models
System role: Sample data for the query walkthrough and its tests
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy.ext.asyncio import AsyncSession

from querylab.boundary.db.models import Member, Team

logger = logging.getLogger(__name__)

FIXTURE_LAYOUT: dict[str, list[tuple[str, int]]] = {
    "teamA": [("member1", 10), ("member2", 20)],
    "teamB": [("member3", 30), ("member4", 40)],
}


@dataclass
class TutorialFixture:
    """Persisted fixture rows, keyed by name."""

    teams: dict[str, Team] = field(default_factory=dict)
    members: dict[str, Member] = field(default_factory=dict)


async def seed_tutorial_fixture(session: AsyncSession) -> TutorialFixture:
    """
    Persist the tutorial teams and members and flush them.

    The rows become visible to later queries in the same transaction;
    committing is left to the caller.

    Args:
        session: Async database session

    Returns:
        TutorialFixture: Persisted teams and members with IDs assigned
    """
    fixture = TutorialFixture()
    for team_name, members in FIXTURE_LAYOUT.items():
        team = Team(team_name)
        session.add(team)
        fixture.teams[team_name] = team
        for username, age in members:
            member = Member(username, age, team)
            session.add(member)
            fixture.members[username] = member

    await session.flush()
    logger.info(
        "Tutorial fixture seeded",
        extra={"teams": len(fixture.teams), "members": len(fixture.members)},
    )
    return fixture
