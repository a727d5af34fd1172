"""Agent, amenity, location and property type services.

These rows are referenced by properties; deleting one that a live property
still points at is refused.
"""

import logfire

from estate.domain.error import (
    BusinessRuleViolationError,
    ConflictError,
    ValidationError,
)
from estate.domain.model import Agent, Amenity, Location, PropertyType
from estate.domain.repository import (
    AgentRepository,
    AmenityRepository,
    LocationRepository,
    PropertyRepository,
    PropertyTypeRepository,
)
from estate.domain.value import (
    AgentId,
    AmenityId,
    LocationId,
    PropertyTypeId,
)
from estate.domain.value.types import IMAGE_MIME_TYPES

from .base import CrudService, revise
from .file_storage import FileStorage, stored_filename
from .slug_service import SlugService, SluggedCrudService

AGENT_PHOTO_DIRECTORY = "agents"
AGENT_PHOTO_MIME_TYPES = IMAGE_MIME_TYPES - {"image/gif", "image/svg+xml"}


class AgentService(CrudService[Agent, AgentId]):
    """Domain service for agents."""

    model = Agent
    resource = "agent"

    def __init__(
        self,
        agent_repository: AgentRepository,
        property_repository: PropertyRepository,
        file_storage: FileStorage,
        max_upload_bytes: int,
    ) -> None:
        super().__init__(agent_repository)
        self.agent_repository = agent_repository
        self.property_repository = property_repository
        self.file_storage = file_storage
        self.max_upload_bytes = max_upload_bytes

    async def _check_save(self, entity: Agent, current: Agent | None) -> None:
        same_email = await self.agent_repository.find_by_email(entity.email)
        if same_email is not None and same_email.id != entity.id:
            raise ConflictError(self.resource, "email", entity.email)
        if entity.license_number:
            same_license = await self.agent_repository.find_by_license_number(
                entity.license_number
            )
            if same_license is not None and same_license.id != entity.id:
                raise ConflictError(self.resource, "license_number", entity.license_number)

    async def _check_delete(self, entity: Agent) -> None:
        if await self.property_repository.count_by_agent(entity.id) > 0:
            logfire.warn("Agent delete refused", agent_id=str(entity.id))
            raise BusinessRuleViolationError(
                "Cannot delete agent with associated properties."
            )

    async def delete(self, entity_id: AgentId) -> None:
        """Delete an agent and their photo."""
        agent = await self.get(entity_id)
        await super().delete(entity_id)
        if agent.photo_path:
            await self.file_storage.delete(agent.photo_path)

    async def replace_photo(
        self, agent_id: AgentId, filename: str, mime_type: str, content: bytes
    ) -> Agent:
        """Store a new photo for an agent and delete the previous one."""
        with logfire.span(
            "agent_service.replace_photo", agent_id=str(agent_id), size=len(content)
        ):
            agent = await self.get(agent_id)
            if mime_type not in AGENT_PHOTO_MIME_TYPES:
                raise ValidationError("The photo must be a jpeg, png or webp image.")
            if len(content) > self.max_upload_bytes:
                raise ValidationError(
                    f"The photo may not be larger than {self.max_upload_bytes} bytes."
                )

            path = await self.file_storage.save(
                AGENT_PHOTO_DIRECTORY,
                stored_filename(filename, agent.name),
                content,
            )
            saved = await self.agent_repository.save(
                revise(agent, {"photo_path": path})
            )
            if agent.photo_path:
                await self.file_storage.delete(agent.photo_path)
            logfire.info("Agent photo replaced", agent_id=str(agent_id), path=path)
            return saved


class AmenityService(SluggedCrudService[Amenity, AmenityId]):
    """Domain service for amenities."""

    model = Amenity
    resource = "amenity"
    slug_fallback = "amenity"

    def __init__(
        self,
        amenity_repository: AmenityRepository,
        property_repository: PropertyRepository,
        slug_service: SlugService,
    ) -> None:
        super().__init__(amenity_repository, slug_service)
        self.property_repository = property_repository

    async def _check_delete(self, entity: Amenity) -> None:
        if await self.property_repository.count_by_amenity(entity.id) > 0:
            raise BusinessRuleViolationError(
                "Cannot delete amenity. It is being used by properties."
            )


class LocationService(SluggedCrudService[Location, LocationId]):
    """Domain service for locations."""

    model = Location
    resource = "location"
    slug_fallback = "location"

    def __init__(
        self,
        location_repository: LocationRepository,
        property_repository: PropertyRepository,
        slug_service: SlugService,
    ) -> None:
        super().__init__(location_repository, slug_service)
        self.property_repository = property_repository

    async def _check_delete(self, entity: Location) -> None:
        if await self.property_repository.count_by_location(entity.id) > 0:
            raise BusinessRuleViolationError(
                "Cannot delete location. It is being used by properties."
            )


class PropertyTypeService(SluggedCrudService[PropertyType, PropertyTypeId]):
    """Domain service for property types."""

    model = PropertyType
    resource = "property_type"
    slug_fallback = "property-type"

    def __init__(
        self,
        property_type_repository: PropertyTypeRepository,
        property_repository: PropertyRepository,
        slug_service: SlugService,
    ) -> None:
        super().__init__(property_type_repository, slug_service)
        self.property_repository = property_repository

    async def _check_delete(self, entity: PropertyType) -> None:
        if await self.property_repository.count_by_property_type(entity.id) > 0:
            raise BusinessRuleViolationError(
                "Cannot delete property type. It is being used by properties."
            )
