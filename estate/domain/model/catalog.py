"""Lookup entities that properties reference: amenities, locations, types."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from estate.domain.model.common import DomainModel
from estate.domain.value import AmenityId, LocationId, LocationType, PropertyTypeId


class Amenity(DomainModel):
    """A feature a property can offer (pool, gym, parking, ...)."""

    id: AmenityId
    name: str = Field(min_length=1, max_length=255)
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = Field(default=None, max_length=100)
    category: str = Field(min_length=1, max_length=100)
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class Location(DomainModel):
    """A place properties are listed in."""

    id: LocationId
    name: str = Field(min_length=1, max_length=255)
    slug: str
    type: LocationType = LocationType.CITY
    description: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class PropertyType(DomainModel):
    """Kind of property (apartment, villa, office, ...)."""

    id: PropertyTypeId
    name: str = Field(min_length=1, max_length=255)
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = Field(default=None, max_length=100)
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
