"""
Member ORM model.

A member optionally belongs to one team. The relationship is lazy by
default: loading a member does not load its team unless the query asks
for it (fetch join / eager option).

Dependencies: sqlalchemy, querylab.boundary.db.base
System role: Member persistence
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from querylab.boundary.db.base import Base, IdentityMixin, TimestampMixin

if TYPE_CHECKING:
    from querylab.boundary.db.models.team_model import Team


class Member(Base, IdentityMixin, TimestampMixin):
    """
    Member ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        username: Optional user name (255 char limit)
        age: Age in years, 0 when not given
        team_id: Foreign key to teams.id (nullable)
        team: Owning Team, lazily loaded
        created_at: Member creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        team: Many-to-one with Team
    """

    __tablename__ = "members"

    username: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        doc="Member user name"
    )

    age: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        doc="Member age"
    )

    team_id: Mapped[int | None] = mapped_column(
        ForeignKey("teams.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        doc="Owning team ID"
    )

    team: Mapped[Optional["Team"]] = relationship(back_populates="members")

    def __init__(
        self,
        username: str | None = None,
        age: int = 0,
        team: "Team | None" = None,
        **kwargs,
    ) -> None:
        super().__init__(username=username, age=age, **kwargs)
        if team is not None:
            self.change_team(team)

    def change_team(self, team: "Team") -> None:
        """
        Move the member to another team.

        The back-populated relationship also appends the member to
        ``team.members`` and removes it from the previous team's list.
        """
        self.team = team

    def __repr__(self) -> str:
        return f"Member(id={self.id}, username={self.username}, age={self.age})"
