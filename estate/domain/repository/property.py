"""Property repository interface."""

from abc import abstractmethod

from estate.domain.model import Property
from estate.domain.repository.base import SluggedRepository
from estate.domain.value import (
    AgentId,
    AmenityId,
    LocationId,
    PropertyId,
    PropertyTypeId,
)


class PropertyRepository(SluggedRepository[Property, PropertyId]):
    """Repository for Property entity.

    Soft-deleted properties are invisible to every read except
    ``slug_exists``, which keeps their slugs reserved.
    """

    @abstractmethod
    async def count_by_agent(self, agent_id: AgentId) -> int:
        """Count live properties listed by an agent."""
        pass

    @abstractmethod
    async def count_by_location(self, location_id: LocationId) -> int:
        """Count live properties in a location."""
        pass

    @abstractmethod
    async def count_by_property_type(self, property_type_id: PropertyTypeId) -> int:
        """Count live properties of a property type."""
        pass

    @abstractmethod
    async def count_by_amenity(self, amenity_id: AmenityId) -> int:
        """Count live properties offering an amenity."""
        pass

    @abstractmethod
    async def soft_delete_many(self, property_ids: list[PropertyId]) -> int:
        """Soft delete several properties at once.

        Args:
            property_ids: Properties to delete

        Returns:
            Number of properties that were live and are now deleted
        """
        pass
