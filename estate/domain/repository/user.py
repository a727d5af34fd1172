"""User and team repository interfaces."""

from abc import abstractmethod
from typing import Optional

from estate.domain.model import Team, User
from estate.domain.repository.base import CrudRepository
from estate.domain.value import TeamId, UserId


class UserRepository(CrudRepository[User, UserId]):
    """Repository for User entity."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users, skipping unknown IDs."""
        pass


class TeamRepository(CrudRepository[Team, TeamId]):
    """Repository for Team entity. Members are saved with their team."""
