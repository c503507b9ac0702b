"""
Team API endpoints.

Routes:
- GET /teams/average-age - Average member age per team
- GET /teams/{name}/members - Members of a team

Dependencies: querylab.application.services, querylab.models
System role: Team query HTTP API
"""

from fastapi import APIRouter, Depends

from querylab.api.deps.dependencies import get_member_query_service
from querylab.application.services import MemberQueryService
from querylab.models.member import MemberResponse
from querylab.models.team import TeamAverageAgeResponse

from .error_handling import handle_query_errors

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("/average-age", response_model=list[TeamAverageAgeResponse])
@handle_query_errors
async def average_age_by_team(
    service: MemberQueryService = Depends(get_member_query_service),
) -> list[TeamAverageAgeResponse]:
    """Average member age of every team that has members."""
    rows = await service.average_age_by_team()
    return [TeamAverageAgeResponse.model_validate(row) for row in rows]


@router.get("/{team_name}/members", response_model=list[MemberResponse])
@handle_query_errors
async def team_members(
    team_name: str,
    service: MemberQueryService = Depends(get_member_query_service),
) -> list[MemberResponse]:
    """
    Members of the named team.

    Raises:
        HTTPException(404): Team not found
    """
    members = await service.members_of_existing_team(team_name)
    return [MemberResponse.model_validate(m) for m in members]
