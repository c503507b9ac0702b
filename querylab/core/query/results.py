"""
Result shapes returned by the query helpers and services.

Dependencies: dataclasses (stdlib)
System role: Typed containers for paged and projected query results
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class QueryResults(Generic[T]):
    """
    One page of results plus the total row count of the unpaged query.

    Attributes:
        results: Rows of the requested page
        total: Row count ignoring offset and limit
        offset: Offset the page was fetched with (None when unpaged)
        limit: Limit the page was fetched with (None when unpaged)
    """

    results: list[T]
    total: int
    offset: int | None = None
    limit: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.results


@dataclass(frozen=True)
class AgeStatistics:
    """Aggregate functions over Member.age."""

    member_count: int
    age_sum: int | None
    age_avg: float | None
    age_max: int | None
    age_min: int | None


@dataclass(frozen=True)
class TeamAverageAge:
    """Average member age of one team."""

    team_name: str
    average_age: float


@dataclass(frozen=True)
class MemberTeamRow:
    """Flat projection of a member and its (optional) team."""

    member_id: int
    username: str | None
    age: int
    team_id: int | None
    team_name: str | None
