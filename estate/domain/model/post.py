"""Post entity."""

import math
import re
from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field

from estate.domain.model.common import DomainModel
from estate.domain.value import CategoryId, MediaId, PostId, PostStatus, TagId, UserId

WORDS_PER_MINUTE = 200
EXCERPT_LENGTH = 150


class Post(DomainModel):
    """Blog post.

    ``comments_count`` is a maintained counter, moved only by comment
    moderation.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=255)
    slug: str
    excerpt: Optional[str] = Field(default=None, max_length=1000)
    content: Optional[str] = None
    meta_title: Optional[str] = Field(default=None, max_length=255)
    meta_description: Optional[str] = Field(default=None, max_length=500)
    meta_keywords: Optional[str] = Field(default=None, max_length=255)
    status: PostStatus = PostStatus.DRAFT
    published_at: Optional[datetime] = None
    scheduled_at: Optional[datetime] = None
    is_featured: bool = False
    allow_comments: bool = True
    is_sticky: bool = False
    author_id: UserId
    category_id: Optional[CategoryId] = None
    featured_image_id: Optional[MediaId] = None
    tag_ids: list[TagId] = Field(default_factory=list)
    views_count: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    sort_order: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def reading_time(self) -> int:
        """Estimated reading time in minutes."""
        words = len(strip_tags(self.content or "").split())
        return math.ceil(words / WORDS_PER_MINUTE)


def strip_tags(html: str) -> str:
    return re.sub(r"<[^>]+>", "", html)


def make_excerpt(content: str | None, limit: int = EXCERPT_LENGTH) -> str | None:
    """Plain-text excerpt of the content, ending in '...' when cut."""
    if not content:
        return None
    text = " ".join(strip_tags(content).split())
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + "..."
