"""User and team entities."""

from datetime import datetime

from pydantic import Field

from estate.domain.model.common import DomainModel
from estate.domain.value import TeamId, TeamRole, UserId


class User(DomainModel):
    """Admin panel account."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    roles: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def has_role(self, role: str) -> bool:
        return role in self.roles


class TeamMember(DomainModel):
    """Membership of a user in a team."""

    user_id: UserId
    role: TeamRole = TeamRole.MEMBER
    joined_at: datetime = Field(default_factory=datetime.now)


class Team(DomainModel):
    """Group of users with a single owner.

    The owner is not listed in ``members``.
    """

    id: TeamId
    name: str = Field(min_length=1, max_length=255)
    owner_id: UserId
    members: list[TeamMember] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def member(self, user_id: UserId) -> TeamMember | None:
        return next((m for m in self.members if m.user_id == user_id), None)
