"""In-memory agent repository for testing."""

from typing import Optional

from estate.domain.model import Agent
from estate.domain.repository import AgentRepository
from estate.domain.value import AgentId
from estate.persistence.repository.inmemory.base import InMemoryCrudRepository
from estate.persistence.repository.listing import AGENT_LIST


class InMemoryAgentRepository(InMemoryCrudRepository[Agent, AgentId], AgentRepository):
    """In-memory implementation of AgentRepository for testing."""

    list_spec = AGENT_LIST

    async def find_by_email(self, email: str) -> Optional[Agent]:
        return next(
            (a for a in self._items.values() if a.email.lower() == email.lower()), None
        )

    async def find_by_license_number(self, license_number: str) -> Optional[Agent]:
        return next(
            (a for a in self._items.values() if a.license_number == license_number),
            None,
        )
