"""Amenity routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from estate.domain.model import Amenity
from estate.domain.service import AmenityService
from estate.domain.value import AmenityId, Page
from estate.interface.api.deps import Listing, admin_user_id

router = APIRouter(
    prefix="/amenities",
    tags=["amenities"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class CreateAmenityAPIRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = None
    icon: str | None = Field(default=None, max_length=100)
    category: str = Field(min_length=1, max_length=100)
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)


class UpdateAmenityAPIRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = None
    icon: str | None = Field(default=None, max_length=100)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    is_active: bool | None = None
    sort_order: int | None = Field(default=None, ge=0)


@router.get("", response_model=Page[Amenity])
async def list_amenities(
    query: Listing, amenity_service: FromDishka[AmenityService]
) -> Page[Amenity]:
    return await amenity_service.list_page(query)


@router.post("", response_model=Amenity, status_code=status.HTTP_201_CREATED)
async def create_amenity(
    request: CreateAmenityAPIRequest, amenity_service: FromDishka[AmenityService]
) -> Amenity:
    return await amenity_service.create(request.model_dump(exclude_unset=True))


@router.get("/{amenity_id}", response_model=Amenity)
async def get_amenity(
    amenity_id: UUID, amenity_service: FromDishka[AmenityService]
) -> Amenity:
    return await amenity_service.get(AmenityId(amenity_id))


@router.patch("/{amenity_id}", response_model=Amenity)
async def update_amenity(
    amenity_id: UUID,
    request: UpdateAmenityAPIRequest,
    amenity_service: FromDishka[AmenityService],
) -> Amenity:
    return await amenity_service.update(
        AmenityId(amenity_id), request.model_dump(exclude_unset=True)
    )


@router.delete("/{amenity_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_amenity(
    amenity_id: UUID, amenity_service: FromDishka[AmenityService]
) -> Response:
    await amenity_service.delete(AmenityId(amenity_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
