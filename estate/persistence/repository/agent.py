"""PostgreSQL implementation of Agent repository."""

from typing import Any, Optional

from estate.domain.model import Agent
from estate.domain.repository import AgentRepository
from estate.domain.value import AgentId
from estate.persistence.mappers import agent_to_dict, row_to_agent
from estate.persistence.repository.base import PostgresCrudRepository
from estate.persistence.repository.listing import AGENT_LIST
from estate.persistence.tables import agents_table


class PostgresAgentRepository(PostgresCrudRepository[Agent, AgentId], AgentRepository):
    """PostgreSQL implementation of AgentRepository."""

    table = agents_table
    resource = "agent"
    list_spec = AGENT_LIST

    def _to_model(self, row: dict[str, Any]) -> Agent:
        return row_to_agent(row)

    def _to_dict(self, entity: Agent) -> dict[str, Any]:
        return agent_to_dict(entity)

    async def find_by_email(self, email: str) -> Optional[Agent]:
        """Find an agent by email address."""
        found = await self._fetch(agents_table.c.email == email)
        return found[0] if found else None

    async def find_by_license_number(self, license_number: str) -> Optional[Agent]:
        """Find an agent by license number."""
        found = await self._fetch(agents_table.c.license_number == license_number)
        return found[0] if found else None
