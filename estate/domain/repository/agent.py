"""Agent repository interface."""

from abc import abstractmethod
from typing import Optional

from estate.domain.model import Agent
from estate.domain.repository.base import CrudRepository
from estate.domain.value import AgentId


class AgentRepository(CrudRepository[Agent, AgentId]):
    """Repository for Agent entity."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Agent]:
        """Find an agent by email address."""
        pass

    @abstractmethod
    async def find_by_license_number(self, license_number: str) -> Optional[Agent]:
        """Find an agent by license number."""
        pass
