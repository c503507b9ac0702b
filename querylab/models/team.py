"""
Team schemas.

Dependencies: pydantic
System role: Team API contracts
"""

from pydantic import BaseModel, ConfigDict


class TeamAverageAgeResponse(BaseModel):
    """Average member age of one team."""

    model_config = ConfigDict(from_attributes=True)

    team_name: str
    average_age: float
