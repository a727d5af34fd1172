"""Post routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from pydantic import BaseModel, Field

from estate.application.usecase.post import (
    ListPostsResponse,
    ListPostsUseCase,
    PostSeoMetaRequest,
    PostSeoMetaUseCase,
    UploadFeaturedImageRequest,
    UploadFeaturedImageResponse,
    UploadFeaturedImageUseCase,
)
from estate.domain.model import Post
from estate.domain.service import PostMeta, PostService
from estate.domain.value import PostId, PostStatus, UserId
from estate.interface.api.deps import AdminId, Listing, admin_user_id

router = APIRouter(
    prefix="/posts",
    tags=["posts"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    excerpt: str | None = Field(default=None, max_length=1000)
    content: str | None = None
    meta_title: str | None = Field(default=None, max_length=255)
    meta_description: str | None = Field(default=None, max_length=500)
    meta_keywords: str | None = Field(default=None, max_length=255)
    status: PostStatus = PostStatus.DRAFT
    published_at: datetime | None = None
    scheduled_at: datetime | None = None
    is_featured: bool = False
    allow_comments: bool = True
    is_sticky: bool = False
    category_id: UUID | None = None
    tag_ids: list[UUID] = Field(default_factory=list)
    sort_order: int = 0


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post; omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    excerpt: str | None = Field(default=None, max_length=1000)
    content: str | None = None
    meta_title: str | None = Field(default=None, max_length=255)
    meta_description: str | None = Field(default=None, max_length=500)
    meta_keywords: str | None = Field(default=None, max_length=255)
    status: PostStatus | None = None
    published_at: datetime | None = None
    scheduled_at: datetime | None = None
    is_featured: bool | None = None
    allow_comments: bool | None = None
    is_sticky: bool | None = None
    category_id: UUID | None = None
    tag_ids: list[UUID] | None = None
    sort_order: int | None = None


class MessageResponse(BaseModel):
    message: str


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    query: Listing, list_posts_use_case: FromDishka[ListPostsUseCase]
) -> ListPostsResponse:
    """List posts with counts by status.

    Filters: ``status``, ``category_id``, ``author_id``.
    """
    return await list_posts_use_case.execute(query)


@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    user_id: AdminId,
    post_service: FromDishka[PostService],
) -> Post:
    """Create a post authored by the signed-in admin."""
    return await post_service.create_for_author(
        request.model_dump(exclude_unset=True), UserId(UUID(user_id))
    )


@router.get("/{post_id}", response_model=Post)
async def get_post(post_id: UUID, post_service: FromDishka[PostService]) -> Post:
    return await post_service.get(PostId(post_id))


@router.patch("/{post_id}", response_model=Post)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    post_service: FromDishka[PostService],
) -> Post:
    return await post_service.update(
        PostId(post_id), request.model_dump(exclude_unset=True)
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: UUID, post_service: FromDishka[PostService]
) -> Response:
    await post_service.delete(PostId(post_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{post_id}/publish", response_model=MessageResponse)
async def publish_post(
    post_id: UUID, post_service: FromDishka[PostService]
) -> MessageResponse:
    await post_service.publish(PostId(post_id))
    return MessageResponse(message="Post published successfully.")


@router.post("/{post_id}/unpublish", response_model=MessageResponse)
async def unpublish_post(
    post_id: UUID, post_service: FromDishka[PostService]
) -> MessageResponse:
    await post_service.unpublish(PostId(post_id))
    return MessageResponse(message="Post unpublished successfully.")


@router.post("/{post_id}/toggle-featured", response_model=MessageResponse)
async def toggle_post_featured(
    post_id: UUID, post_service: FromDishka[PostService]
) -> MessageResponse:
    post = await post_service.toggle_featured(PostId(post_id))
    state = "featured" if post.is_featured else "unfeatured"
    return MessageResponse(message=f"Post {state} successfully.")


@router.post(
    "/{post_id}/duplicate", response_model=Post, status_code=status.HTTP_201_CREATED
)
async def duplicate_post(
    post_id: UUID, post_service: FromDishka[PostService]
) -> Post:
    """Copy a post as a new draft with its tags."""
    return await post_service.duplicate(PostId(post_id))


@router.post("/{post_id}/featured-image", response_model=UploadFeaturedImageResponse)
async def upload_featured_image(
    post_id: UUID,
    user_id: AdminId,
    upload_use_case: FromDishka[UploadFeaturedImageUseCase],
    image: UploadFile = File(...),
    alt_text: str | None = Form(default=None),
) -> UploadFeaturedImageResponse:
    """Upload an image into the media library and set it as featured image."""
    content = await image.read()
    return await upload_use_case.execute(
        UploadFeaturedImageRequest(
            post_id=post_id,
            user_id=user_id,
            filename=image.filename or "image",
            mime_type=image.content_type or "application/octet-stream",
            content=content,
            alt_text=alt_text,
        )
    )


@router.get("/{post_id}/seo", response_model=PostMeta)
async def get_post_seo(
    post_id: UUID, seo_meta_use_case: FromDishka[PostSeoMetaUseCase]
) -> PostMeta:
    """Meta tags the post renders with, after site defaults are applied."""
    return await seo_meta_use_case.execute(PostSeoMetaRequest(post_id=post_id))
