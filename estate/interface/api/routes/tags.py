"""Tag routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from estate.domain.model import Tag
from estate.domain.service import TagService
from estate.domain.value import Page, TagId
from estate.interface.api.deps import Listing, admin_user_id

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class CreateTagAPIRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    color: str | None = Field(default=None, max_length=7)
    seo_title: str | None = Field(default=None, max_length=255)
    seo_description: str | None = Field(default=None, max_length=160)
    seo_keywords: str | None = Field(default=None, max_length=255)
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)


class UpdateTagAPIRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    color: str | None = Field(default=None, max_length=7)
    seo_title: str | None = Field(default=None, max_length=255)
    seo_description: str | None = Field(default=None, max_length=160)
    seo_keywords: str | None = Field(default=None, max_length=255)
    is_active: bool | None = None
    sort_order: int | None = Field(default=None, ge=0)


@router.get("", response_model=Page[Tag])
async def list_tags(query: Listing, tag_service: FromDishka[TagService]) -> Page[Tag]:
    return await tag_service.list_page(query)


@router.post("", response_model=Tag, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: CreateTagAPIRequest, tag_service: FromDishka[TagService]
) -> Tag:
    return await tag_service.create(request.model_dump(exclude_unset=True))


@router.get("/{tag_id}", response_model=Tag)
async def get_tag(tag_id: UUID, tag_service: FromDishka[TagService]) -> Tag:
    return await tag_service.get(TagId(tag_id))


@router.patch("/{tag_id}", response_model=Tag)
async def update_tag(
    tag_id: UUID, request: UpdateTagAPIRequest, tag_service: FromDishka[TagService]
) -> Tag:
    return await tag_service.update(TagId(tag_id), request.model_dump(exclude_unset=True))


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(tag_id: UUID, tag_service: FromDishka[TagService]) -> Response:
    await tag_service.delete(TagId(tag_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
