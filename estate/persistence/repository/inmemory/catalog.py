"""In-memory amenity, location and property type repositories for testing."""

from estate.domain.model import Amenity, Location, PropertyType
from estate.domain.repository import (
    AmenityRepository,
    LocationRepository,
    PropertyTypeRepository,
)
from estate.domain.value import AmenityId, LocationId, PropertyTypeId
from estate.persistence.repository.inmemory.base import InMemorySluggedRepository
from estate.persistence.repository.listing import (
    AMENITY_LIST,
    LOCATION_LIST,
    PROPERTY_TYPE_LIST,
)


class InMemoryAmenityRepository(
    InMemorySluggedRepository[Amenity, AmenityId], AmenityRepository
):
    list_spec = AMENITY_LIST


class InMemoryLocationRepository(
    InMemorySluggedRepository[Location, LocationId], LocationRepository
):
    list_spec = LOCATION_LIST


class InMemoryPropertyTypeRepository(
    InMemorySluggedRepository[PropertyType, PropertyTypeId], PropertyTypeRepository
):
    list_spec = PROPERTY_TYPE_LIST
