"""
Member schemas.

Search condition and response schemas for member queries.

Dependencies: pydantic
System role: Member API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class MemberSearchCondition(BaseModel):
    """
    Optional filters for a member search.

    Every field is optional; blank or missing fields do not constrain
    the result.
    """

    username: str | None = Field(None, description="Exact username")
    team_name: str | None = Field(None, description="Exact team name")
    age_goe: int | None = Field(None, ge=0, description="Minimum age (inclusive)")
    age_loe: int | None = Field(None, ge=0, description="Maximum age (inclusive)")


class MemberResponse(BaseModel):
    """Response schema for a member without its team."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str | None
    age: int


class MemberTeamResponse(BaseModel):
    """Response schema for a member joined with its team."""

    model_config = ConfigDict(from_attributes=True)

    member_id: int
    username: str | None
    age: int
    team_id: int | None
    team_name: str | None


class AgeStatisticsResponse(BaseModel):
    """Response schema for age aggregates over all members."""

    model_config = ConfigDict(from_attributes=True)

    member_count: int
    age_sum: int | None
    age_avg: float | None
    age_max: int | None
    age_min: int | None
