"""
Query helpers layered on SQLAlchemy's select() construct.

Exports:
  - fetch, fetch_one, fetch_first, fetch_count, fetch_results: Result-shape helpers
  - paginate, single_result: Paging and single-row reduction
  - optional_eq, optional_goe, optional_loe, all_of, where_present: Dynamic predicates
  - QueryResults, AgeStatistics, TeamAverageAge, MemberTeamRow: Result containers
"""

from querylab.core.query.conditions import (
    all_of,
    optional_eq,
    optional_goe,
    optional_loe,
    where_present,
)
from querylab.core.query.fetch import (
    fetch,
    fetch_count,
    fetch_first,
    fetch_one,
    fetch_results,
    paginate,
    single_result,
)
from querylab.core.query.results import (
    AgeStatistics,
    MemberTeamRow,
    QueryResults,
    TeamAverageAge,
)

__all__ = [
    "all_of",
    "optional_eq",
    "optional_goe",
    "optional_loe",
    "where_present",
    "fetch",
    "fetch_count",
    "fetch_first",
    "fetch_one",
    "fetch_results",
    "paginate",
    "single_result",
    "AgeStatistics",
    "MemberTeamRow",
    "QueryResults",
    "TeamAverageAge",
]
