"""Location routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from estate.domain.model import Location
from estate.domain.service import LocationService
from estate.domain.value import LocationId, LocationType, Page
from estate.interface.api.deps import Listing, admin_user_id

router = APIRouter(
    prefix="/locations",
    tags=["locations"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class CreateLocationAPIRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    type: LocationType = LocationType.CITY
    description: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)


class UpdateLocationAPIRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    type: LocationType | None = None
    description: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    is_active: bool | None = None
    sort_order: int | None = Field(default=None, ge=0)


@router.get("", response_model=Page[Location])
async def list_locations(
    query: Listing, location_service: FromDishka[LocationService]
) -> Page[Location]:
    """List locations; filter by ``type``."""
    return await location_service.list_page(query)


@router.post("", response_model=Location, status_code=status.HTTP_201_CREATED)
async def create_location(
    request: CreateLocationAPIRequest, location_service: FromDishka[LocationService]
) -> Location:
    return await location_service.create(request.model_dump(exclude_unset=True))


@router.get("/{location_id}", response_model=Location)
async def get_location(
    location_id: UUID, location_service: FromDishka[LocationService]
) -> Location:
    return await location_service.get(LocationId(location_id))


@router.patch("/{location_id}", response_model=Location)
async def update_location(
    location_id: UUID,
    request: UpdateLocationAPIRequest,
    location_service: FromDishka[LocationService],
) -> Location:
    return await location_service.update(
        LocationId(location_id), request.model_dump(exclude_unset=True)
    )


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(
    location_id: UUID, location_service: FromDishka[LocationService]
) -> Response:
    await location_service.delete(LocationId(location_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
