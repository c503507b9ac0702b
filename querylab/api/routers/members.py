"""
Member API endpoints.

Routes:
- GET /members - Search members (optional filters) with paging and total
- GET /members/statistics - Age aggregates over all members
- GET /members/{id} - Single member with its team

Dependencies: querylab.application.services, querylab.models
System role: Member query HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from querylab.api.deps.dependencies import get_member_query_service
from querylab.application.services import MemberQueryService
from querylab.models.common import PageResponse
from querylab.models.member import (
    AgeStatisticsResponse,
    MemberSearchCondition,
    MemberTeamResponse,
)

from .error_handling import handle_query_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/members", tags=["members"])


@router.get("", response_model=PageResponse[MemberTeamResponse])
@handle_query_errors
async def search_members(
    condition: MemberSearchCondition = Depends(),
    offset: int = Query(0, description="Rows to skip"),
    limit: int = Query(20, description="Page size"),
    service: MemberQueryService = Depends(get_member_query_service),
) -> PageResponse[MemberTeamResponse]:
    """
    Search members with optional filters.

    Args:
        condition: username, team_name, age_goe, age_loe (all optional)
        offset: Rows to skip (default 0)
        limit: Page size (default 20)
        service: Injected MemberQueryService

    Returns:
        PageResponse[MemberTeamResponse]: Page of member+team rows with total

    Raises:
        HTTPException(400): Invalid offset or limit
    """
    page = await service.search_member_teams(condition, offset=offset, limit=limit)
    return PageResponse[MemberTeamResponse](
        content=[MemberTeamResponse.model_validate(row) for row in page.results],
        total=page.total,
        offset=page.offset,
        limit=page.limit,
    )


@router.get("/statistics", response_model=AgeStatisticsResponse)
@handle_query_errors
async def member_statistics(
    service: MemberQueryService = Depends(get_member_query_service),
) -> AgeStatisticsResponse:
    """Count, sum, average, maximum and minimum of member ages."""
    stats = await service.age_statistics()
    return AgeStatisticsResponse.model_validate(stats)


@router.get("/{member_id}", response_model=MemberTeamResponse)
@handle_query_errors
async def get_member(
    member_id: int,
    service: MemberQueryService = Depends(get_member_query_service),
) -> MemberTeamResponse:
    """
    Get a member with its team.

    Raises:
        HTTPException(404): Member not found
    """
    member = await service.get_member_with_team(member_id)
    return MemberTeamResponse(
        member_id=member.id,
        username=member.username,
        age=member.age,
        team_id=member.team.id if member.team else None,
        team_name=member.team.name if member.team else None,
    )
