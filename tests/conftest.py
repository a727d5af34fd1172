"""Test configuration and fixtures."""

from uuid import UUID, uuid4

import pytest

from estate.config import Settings
from estate.domain.model import Comment, Post, User
from estate.domain.value import CommentId, CommentStatus, PostId, UserId
from estate.util.jwt import create_token


def make_post(title: str = "Market update", **fields) -> Post:
    """Build a draft post with a slug derived from the title."""
    slug = "-".join(title.lower().split())
    return Post(
        id=PostId(uuid4()),
        title=title,
        slug=fields.pop("slug", slug),
        author_id=fields.pop("author_id", UserId(uuid4())),
        **fields,
    )


def make_comment(
    post_id: PostId,
    status: CommentStatus = CommentStatus.PENDING,
    parent_id: CommentId | None = None,
    **fields,
) -> Comment:
    """Build a guest comment on a post."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_name=fields.pop("author_name", "Guest"),
        content=fields.pop("content", "Lovely listing."),
        status=status,
        parent_id=parent_id,
        **fields,
    )


def make_user(name: str = "Dana Admin", **fields) -> User:
    email = fields.pop("email", f"{name.split()[0].lower()}@example.com")
    return User(id=UserId(uuid4()), name=name, email=email, **fields)


@pytest.fixture
def admin_id() -> UUID:
    return uuid4()


@pytest.fixture
def auth_cookies(admin_id) -> dict[str, str]:
    """Cookies carrying a valid admin session token."""
    return {"auth_token": create_token(str(admin_id), Settings().auth)}
