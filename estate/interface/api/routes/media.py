"""Media library routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from pydantic import BaseModel, Field

from estate.application.usecase.media import ListMediaResponse, ListMediaUseCase
from estate.domain.model import Media
from estate.domain.service import MediaService
from estate.domain.value import MediaId, UserId
from estate.interface.api.deps import AdminId, Listing, admin_user_id

router = APIRouter(
    prefix="/media",
    tags=["media"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class UpdateMediaAPIRequest(BaseModel):
    """Editable media metadata; the file itself cannot be replaced."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    alt_text: str | None = Field(default=None, max_length=500)
    description: str | None = Field(default=None, max_length=1000)
    is_active: bool | None = None


@router.get("", response_model=ListMediaResponse)
async def list_media(
    query: Listing, list_media_use_case: FromDishka[ListMediaUseCase]
) -> ListMediaResponse:
    """List media with counts by type; filter by ``type``."""
    return await list_media_use_case.execute(query)


@router.post("", response_model=Media, status_code=status.HTTP_201_CREATED)
async def upload_media(
    user_id: AdminId,
    media_service: FromDishka[MediaService],
    file: UploadFile = File(...),
    name: str | None = Form(default=None),
    alt_text: str | None = Form(default=None),
    description: str | None = Form(default=None),
    is_active: bool = Form(default=True),
) -> Media:
    """Upload a file into the media library."""
    content = await file.read()
    return await media_service.upload(
        filename=file.filename or "file",
        mime_type=file.content_type or "application/octet-stream",
        content=content,
        uploaded_by=UserId(UUID(user_id)),
        name=name,
        alt_text=alt_text,
        description=description,
        is_active=is_active,
    )


@router.get("/{media_id}", response_model=Media)
async def get_media(media_id: UUID, media_service: FromDishka[MediaService]) -> Media:
    return await media_service.get(MediaId(media_id))


@router.patch("/{media_id}", response_model=Media)
async def update_media(
    media_id: UUID,
    request: UpdateMediaAPIRequest,
    media_service: FromDishka[MediaService],
) -> Media:
    return await media_service.update(
        MediaId(media_id), request.model_dump(exclude_unset=True)
    )


@router.delete("/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_media(
    media_id: UUID, media_service: FromDishka[MediaService]
) -> Response:
    """Delete a media entry and its stored file."""
    await media_service.delete(MediaId(media_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
