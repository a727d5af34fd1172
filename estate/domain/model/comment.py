"""Comment entity.

Comments belong to a post and may reply to another comment. Moderation
moves them between statuses; approved comments are counted on the post
(``comments_count``) and on their parent (``replies_count``).
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, computed_field

from estate.domain.model.common import DomainModel
from estate.domain.value import CommentId, CommentStatus, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    A comment is written either by a registered user (``user_id`` set) or by
    a guest identified only by ``author_name`` and ``author_email``.
    Depth is not stored; it is computed by walking ``parent_id``.
    """

    id: CommentId
    post_id: PostId
    user_id: Optional[UserId] = None
    author_name: Optional[str] = Field(default=None, max_length=255)
    author_email: Optional[str] = Field(default=None, max_length=255)
    author_website: Optional[str] = Field(default=None, max_length=255)
    content: str = Field(min_length=1, max_length=5000)
    status: CommentStatus = CommentStatus.PENDING
    approved_at: Optional[datetime] = None
    approved_by: Optional[UserId] = None
    parent_id: Optional[CommentId] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    likes_count: int = Field(default=0, ge=0)
    replies_count: int = Field(default=0, ge=0)
    is_featured: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @computed_field
    @property
    def is_guest(self) -> bool:
        return self.user_id is None

    def display_name(self, user_name: str | None = None) -> str:
        """Name shown for the author: user name, guest name, or 'Anonymous'."""
        return user_name or self.author_name or "Anonymous"
