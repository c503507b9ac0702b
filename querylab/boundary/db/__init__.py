"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IdentityMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - Team, Member: Domain entities
  - team_crud, member_crud: CRUD operation singletons
  - is_loaded(): Loading-state inspection

Dependencies: sqlalchemy, querylab.configs
System role: Database adapter for the Member/Team schema.
"""

from querylab.boundary.db.base import Base, IdentityMixin, TimestampMixin
from querylab.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from querylab.boundary.db.models import Member, Team
from querylab.boundary.db.CRUD import (
    BaseCRUD,
    MemberCRUD,
    TeamCRUD,
    member_crud,
    team_crud,
)
from querylab.boundary.db.utils import is_loaded

__all__ = [
    # Base classes
    "Base",
    "IdentityMixin",
    "TimestampMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "Member",
    "Team",
    # CRUD
    "BaseCRUD",
    "MemberCRUD",
    "TeamCRUD",
    "member_crud",
    "team_crud",
    # Utilities
    "is_loaded",
]
