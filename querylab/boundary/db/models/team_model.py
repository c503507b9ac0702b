"""
Team ORM model.

A team groups zero or more members. The member list is the inverse side
of Member.team and is kept in sync by the back-populated relationship.

Dependencies: sqlalchemy, querylab.boundary.db.base
System role: Team persistence
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from querylab.boundary.db.base import Base, IdentityMixin, TimestampMixin

if TYPE_CHECKING:
    from querylab.boundary.db.models.member_model import Member


class Team(Base, IdentityMixin, TimestampMixin):
    """
    Team ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        name: Team name (255 char limit)
        members: Members that reference this team
        created_at: Team creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        members: One-to-many with Member (SET NULL on team deletion)
    """

    __tablename__ = "teams"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Team name"
    )

    members: Mapped[list["Member"]] = relationship(
        back_populates="team",
        passive_deletes=True,
    )

    def __init__(self, name: str, **kwargs) -> None:
        super().__init__(name=name, **kwargs)

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name})"
