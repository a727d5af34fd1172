"""User and team domain services."""

from datetime import datetime

import logfire

from estate.domain.error import BusinessRuleViolationError, ConflictError
from estate.domain.model import Team, TeamMember, User
from estate.domain.repository import TeamRepository, UserRepository
from estate.domain.value import TeamId, TeamRole, UserId

from .base import CrudService, revise


class UserService(CrudService[User, UserId]):
    """Domain service for admin users."""

    model = User
    resource = "user"

    def __init__(self, user_repository: UserRepository) -> None:
        super().__init__(user_repository)
        self.user_repository = user_repository

    async def _check_save(self, entity: User, current: User | None) -> None:
        same_email = await self.user_repository.find_by_email(entity.email)
        if same_email is not None and same_email.id != entity.id:
            raise ConflictError(self.resource, "email", entity.email)

    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Users by ID, unknown IDs left out."""
        return {u.id: u for u in await self.user_repository.find_by_ids(user_ids)}

    async def assign_role(self, user_id: UserId, role: str) -> User:
        user = await self.get(user_id)
        if user.has_role(role):
            return user
        logfire.info("Role assigned", user_id=str(user_id), role=role)
        return await self.user_repository.save(
            revise(user, {"roles": [*user.roles, role]})
        )

    async def remove_role(self, user_id: UserId, role: str) -> User:
        user = await self.get(user_id)
        if not user.has_role(role):
            return user
        logfire.info("Role removed", user_id=str(user_id), role=role)
        return await self.user_repository.save(
            revise(user, {"roles": [r for r in user.roles if r != role]})
        )

    async def delete_as(self, user_id: UserId, acting_user_id: UserId) -> None:
        """Delete a user on behalf of an admin, who may not delete themselves."""
        if user_id == acting_user_id:
            raise BusinessRuleViolationError("You cannot delete your own account.")
        await self.delete(user_id)


class TeamService(CrudService[Team, TeamId]):
    """Domain service for teams and their membership."""

    model = Team
    resource = "team"

    def __init__(
        self, team_repository: TeamRepository, user_repository: UserRepository
    ) -> None:
        super().__init__(team_repository)
        self.team_repository = team_repository
        self.user_repository = user_repository

    async def _check_save(self, entity: Team, current: Team | None) -> None:
        if await self.user_repository.find_by_id(entity.owner_id) is None:
            raise BusinessRuleViolationError("The team owner must be an existing user.")

    async def add_member(
        self, team_id: TeamId, user_id: UserId, role: TeamRole = TeamRole.MEMBER
    ) -> Team:
        """Add a user to a team.

        Raises:
            BusinessRuleViolationError: If the user is the owner or already a member
        """
        with logfire.span(
            "team_service.add_member", team_id=str(team_id), user_id=str(user_id)
        ):
            team = await self.get(team_id)
            if user_id == team.owner_id:
                raise BusinessRuleViolationError("The team owner is already on the team.")
            if team.member(user_id) is not None:
                raise BusinessRuleViolationError(
                    "This user already belongs to the team."
                )
            if await self.user_repository.find_by_id(user_id) is None:
                raise BusinessRuleViolationError("The user does not exist.")

            member = TeamMember(user_id=user_id, role=role, joined_at=datetime.now())
            saved = await self.team_repository.save(
                revise(team, {"members": [*team.members, member]})
            )
            logfire.info("Team member added", team_id=str(team_id), user_id=str(user_id))
            return saved

    def _require_member(self, team: Team, user_id: UserId) -> TeamMember:
        if user_id == team.owner_id:
            raise BusinessRuleViolationError("The team owner cannot be changed here.")
        member = team.member(user_id)
        if member is None:
            raise BusinessRuleViolationError("This user does not belong to the team.")
        return member

    async def remove_member(self, team_id: TeamId, user_id: UserId) -> Team:
        team = await self.get(team_id)
        self._require_member(team, user_id)
        logfire.info("Team member removed", team_id=str(team_id), user_id=str(user_id))
        return await self.team_repository.save(
            revise(team, {"members": [m for m in team.members if m.user_id != user_id]})
        )

    async def update_member_role(
        self, team_id: TeamId, user_id: UserId, role: TeamRole
    ) -> Team:
        team = await self.get(team_id)
        member = self._require_member(team, user_id)
        updated = member.model_copy(update={"role": role})
        return await self.team_repository.save(
            revise(
                team,
                {
                    "members": [
                        updated if m.user_id == user_id else m for m in team.members
                    ]
                },
            )
        )
