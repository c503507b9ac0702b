"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from querylab.boundary.db.CRUD import member_crud, team_crud

    team = await team_crud.create(db, name="teamA")
    member = await member_crud.create(db, username="member1", age=10, team=team)
"""

from querylab.boundary.db.CRUD.base_crud import BaseCRUD
from querylab.boundary.db.CRUD.team_crud import TeamCRUD, team_crud
from querylab.boundary.db.CRUD.member_crud import MemberCRUD, member_crud

__all__ = [
    "BaseCRUD",
    "TeamCRUD",
    "team_crud",
    "MemberCRUD",
    "member_crud",
]
