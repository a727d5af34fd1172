"""In-memory property repository for testing."""

from datetime import datetime

from estate.domain.model import Property
from estate.domain.repository import PropertyRepository
from estate.domain.value import (
    AgentId,
    AmenityId,
    LocationId,
    PropertyId,
    PropertyTypeId,
)
from estate.persistence.repository.inmemory.base import InMemorySluggedRepository
from estate.persistence.repository.listing import PROPERTY_LIST


class InMemoryPropertyRepository(
    InMemorySluggedRepository[Property, PropertyId], PropertyRepository
):
    """In-memory implementation of PropertyRepository for testing.

    Deleted properties stay in storage with ``deleted_at`` set.
    """

    list_spec = PROPERTY_LIST

    def _visible(self, entity: Property) -> bool:
        return entity.deleted_at is None

    async def count_by_agent(self, agent_id: AgentId) -> int:
        return sum(1 for p in self._all() if p.agent_id == agent_id)

    async def count_by_location(self, location_id: LocationId) -> int:
        return sum(1 for p in self._all() if p.location_id == location_id)

    async def count_by_property_type(self, property_type_id: PropertyTypeId) -> int:
        return sum(1 for p in self._all() if p.property_type_id == property_type_id)

    async def count_by_amenity(self, amenity_id: AmenityId) -> int:
        return sum(1 for p in self._all() if amenity_id in p.amenity_ids)

    async def soft_delete_many(self, property_ids: list[PropertyId]) -> int:
        now = datetime.now()
        deleted = 0
        for property_id in dict.fromkeys(property_ids):
            prop = self._items.get(property_id)
            if prop is None or prop.deleted_at is not None:
                continue
            self._items[property_id] = prop.model_copy(
                update={"deleted_at": now, "updated_at": now}
            )
            deleted += 1
        return deleted

    async def delete(self, entity_id: PropertyId) -> None:
        await self.soft_delete_many([entity_id])
