"""
Database models package.

Exports:
  - Team: Team ORM model
  - Member: Member ORM model (many-to-one to Team)

Dependencies: sqlalchemy, querylab.boundary.db.base
System role: Database model definitions for domain entities
"""

from querylab.boundary.db.models.team_model import Team
from querylab.boundary.db.models.member_model import Member

__all__ = [
    "Team",
    "Member",
]
