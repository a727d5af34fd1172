"""In-memory user and team repositories for testing."""

from typing import Any, Optional

from estate.domain.model import Team, User
from estate.domain.repository import TeamRepository, UserRepository
from estate.domain.value import TeamId, UserId
from estate.persistence.repository.inmemory.base import InMemoryCrudRepository
from estate.persistence.repository.listing import TEAM_LIST, USER_LIST


class InMemoryUserRepository(InMemoryCrudRepository[User, UserId], UserRepository):
    """In-memory implementation of UserRepository for testing."""

    list_spec = USER_LIST

    def _custom_filter(self, entity: User, name: str, value: Any) -> bool:
        if name == "role":
            return entity.has_role(value)
        return True

    async def find_by_email(self, email: str) -> Optional[User]:
        return next(
            (u for u in self._items.values() if u.email.lower() == email.lower()), None
        )

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        return [self._items[i] for i in user_ids if i in self._items]


class InMemoryTeamRepository(InMemoryCrudRepository[Team, TeamId], TeamRepository):
    list_spec = TEAM_LIST
