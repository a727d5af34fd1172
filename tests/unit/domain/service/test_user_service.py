"""Unit tests for UserService and TeamService."""

from uuid import uuid4

import pytest

from estate.domain.error import BusinessRuleViolationError, ConflictError
from estate.domain.service import TeamService, UserService
from estate.domain.value import TeamRole, UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestUserService:
    """Tests for user accounts and roles."""

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        await service.create({"name": "Dana", "email": "dana@example.com"})

        # Act & Assert
        with pytest.raises(ConflictError):
            await service.create({"name": "Other Dana", "email": "dana@example.com"})

    @pytest.mark.asyncio
    async def test_cannot_delete_own_account(self, unit_env):
        """An admin deleting themselves should be refused."""
        # Arrange
        service = await unit_env.get(UserService)
        user = await service.create({"name": "Dana", "email": "dana@example.com"})

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="your own account"):
            await service.delete_as(user.id, user.id)

        assert await service.get(user.id) == user

    @pytest.mark.asyncio
    async def test_delete_other_user(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        user = await service.create({"name": "Dana", "email": "dana@example.com"})

        # Act
        await service.delete_as(user.id, UserId(uuid4()))

        # Assert
        assert await service.get_many([user.id]) == {}

    @pytest.mark.asyncio
    async def test_role_assignment_is_idempotent(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        user = await service.create({"name": "Dana", "email": "dana@example.com"})

        # Act
        await service.assign_role(user.id, "editor")
        assigned = await service.assign_role(user.id, "editor")
        removed = await service.remove_role(user.id, "editor")
        removed_again = await service.remove_role(user.id, "editor")

        # Assert
        assert assigned.roles == ["editor"]
        assert removed.roles == []
        assert removed_again.roles == []


class TestTeamService:
    """Tests for team membership rules."""

    async def _team_with_owner(self, unit_env):
        users = await unit_env.get(UserService)
        teams = await unit_env.get(TeamService)
        owner = await users.create({"name": "Owner", "email": "owner@example.com"})
        member = await users.create({"name": "Member", "email": "member@example.com"})
        team = await teams.create({"name": "Sales", "owner_id": owner.id})
        return teams, team, owner, member

    @pytest.mark.asyncio
    async def test_owner_must_exist(self, unit_env):
        # Arrange
        teams = await unit_env.get(TeamService)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await teams.create({"name": "Sales", "owner_id": UserId(uuid4())})

    @pytest.mark.asyncio
    async def test_add_member_and_change_role(self, unit_env):
        # Arrange
        teams, team, _, member = await self._team_with_owner(unit_env)

        # Act
        await teams.add_member(team.id, member.id)
        result = await teams.update_member_role(team.id, member.id, TeamRole.ADMIN)

        # Assert
        assert len(result.members) == 1
        assert result.members[0].user_id == member.id
        assert result.members[0].role == TeamRole.ADMIN

    @pytest.mark.asyncio
    async def test_owner_cannot_be_added(self, unit_env):
        # Arrange
        teams, team, owner, _ = await self._team_with_owner(unit_env)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="owner"):
            await teams.add_member(team.id, owner.id)

    @pytest.mark.asyncio
    async def test_member_cannot_be_added_twice(self, unit_env):
        # Arrange
        teams, team, _, member = await self._team_with_owner(unit_env)
        await teams.add_member(team.id, member.id)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="already belongs"):
            await teams.add_member(team.id, member.id)

    @pytest.mark.asyncio
    async def test_unknown_user_cannot_be_added(self, unit_env):
        # Arrange
        teams, team, _, _ = await self._team_with_owner(unit_env)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="does not exist"):
            await teams.add_member(team.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_remove_non_member_refused(self, unit_env):
        # Arrange
        teams, team, _, member = await self._team_with_owner(unit_env)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="does not belong"):
            await teams.remove_member(team.id, member.id)

    @pytest.mark.asyncio
    async def test_remove_member(self, unit_env):
        # Arrange
        teams, team, _, member = await self._team_with_owner(unit_env)
        await teams.add_member(team.id, member.id)

        # Act
        result = await teams.remove_member(team.id, member.id)

        # Assert
        assert result.members == []
