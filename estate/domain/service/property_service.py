"""Property listing domain service."""

from typing import Any

import logfire

from estate.domain.error import ValidationError
from estate.domain.model import Property
from estate.domain.repository import (
    AgentRepository,
    AmenityRepository,
    LocationRepository,
    PropertyRepository,
    PropertyTypeRepository,
)
from estate.domain.value import PropertyId

from .slug_service import SlugService, SluggedCrudService


class PropertyService(SluggedCrudService[Property, PropertyId]):
    """Domain service for properties.

    References to the property type, location, agent and amenities must
    point at existing rows. Deletes are soft.
    """

    model = Property
    resource = "property"
    slug_source = "title"
    slug_fallback = "property"

    def __init__(
        self,
        property_repository: PropertyRepository,
        property_type_repository: PropertyTypeRepository,
        location_repository: LocationRepository,
        agent_repository: AgentRepository,
        amenity_repository: AmenityRepository,
        slug_service: SlugService,
    ) -> None:
        super().__init__(property_repository, slug_service)
        self.property_repository = property_repository
        self.property_type_repository = property_type_repository
        self.location_repository = location_repository
        self.agent_repository = agent_repository
        self.amenity_repository = amenity_repository

    async def _prepare(
        self, fields: dict[str, Any], current: Property | None
    ) -> dict[str, Any]:
        fields = await super()._prepare(fields, current)
        if "amenity_ids" in fields:
            fields["amenity_ids"] = list(dict.fromkeys(fields["amenity_ids"] or []))
        return fields

    async def _check_save(self, entity: Property, current: Property | None) -> None:
        references = (
            ("property_type_id", self.property_type_repository),
            ("location_id", self.location_repository),
            ("agent_id", self.agent_repository),
        )
        for field, repository in references:
            value = getattr(entity, field)
            if current is not None and getattr(current, field) == value:
                continue
            if await repository.find_by_id(value) is None:
                raise ValidationError(f"The selected {field} is invalid.")

        for amenity_id in entity.amenity_ids:
            if await self.amenity_repository.find_by_id(amenity_id) is None:
                raise ValidationError(f"The selected amenity {amenity_id} is invalid.")

    async def bulk_delete(self, property_ids: list[PropertyId]) -> int:
        """Soft delete several properties; unknown IDs are skipped.

        Returns:
            Number of properties deleted
        """
        with logfire.span("property_service.bulk_delete", count=len(property_ids)):
            deleted = await self.property_repository.soft_delete_many(property_ids)
            logfire.info("Properties deleted", requested=len(property_ids), deleted=deleted)
            return deleted
