"""Amenity, location and property type repository interfaces."""

from estate.domain.model import Amenity, Location, PropertyType
from estate.domain.repository.base import SluggedRepository
from estate.domain.value import AmenityId, LocationId, PropertyTypeId


class AmenityRepository(SluggedRepository[Amenity, AmenityId]):
    """Repository for Amenity entity."""


class LocationRepository(SluggedRepository[Location, LocationId]):
    """Repository for Location entity."""


class PropertyTypeRepository(SluggedRepository[PropertyType, PropertyTypeId]):
    """Repository for PropertyType entity."""
