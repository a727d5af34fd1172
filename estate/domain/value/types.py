"""Domain value objects for the estate admin.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from estate.domain.value.common import RootValueObject


class CommentStatus(str, Enum):
    """Moderation status of a comment."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SPAM = "spam"


class BulkCommentAction(str, Enum):
    """Actions accepted by the bulk comment endpoint."""

    APPROVE = "approve"
    REJECT = "reject"
    SPAM = "spam"
    DELETE = "delete"

    @property
    def past_tense(self) -> str:
        return {
            BulkCommentAction.APPROVE: "approved",
            BulkCommentAction.REJECT: "rejected",
            BulkCommentAction.SPAM: "marked as spam",
            BulkCommentAction.DELETE: "deleted",
        }[self]


class PostStatus(str, Enum):
    """Publishing status of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"
    SCHEDULED = "scheduled"
    ARCHIVED = "archived"


class ListingType(str, Enum):
    """Whether a property is offered for sale or for rent."""

    SALE = "sale"
    RENT = "rent"


class PropertyStatus(str, Enum):
    """Availability of a property listing."""

    AVAILABLE = "available"
    SOLD = "sold"
    RENTED = "rented"
    PENDING = "pending"
    DRAFT = "draft"


class LocationType(str, Enum):
    """Administrative level of a location."""

    CITY = "city"
    SUBURB = "suburb"
    DISTRICT = "district"
    REGION = "region"
    STATE = "state"


class MediaType(str, Enum):
    """Broad media category derived from the MIME type."""

    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"
    AUDIO = "audio"
    OTHER = "other"

    @classmethod
    def from_mime_type(cls, mime_type: str) -> "MediaType":
        """Map a MIME type onto a media category."""
        if mime_type in IMAGE_MIME_TYPES:
            return cls.IMAGE
        if mime_type in DOCUMENT_MIME_TYPES:
            return cls.DOCUMENT
        if mime_type in VIDEO_MIME_TYPES:
            return cls.VIDEO
        if mime_type in AUDIO_MIME_TYPES:
            return cls.AUDIO
        return cls.OTHER


IMAGE_MIME_TYPES = frozenset(
    {"image/jpeg", "image/png", "image/gif", "image/webp", "image/svg+xml"}
)
DOCUMENT_MIME_TYPES = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }
)
VIDEO_MIME_TYPES = frozenset({"video/mp4", "video/avi", "video/mov", "video/webm"})
AUDIO_MIME_TYPES = frozenset({"audio/mp3", "audio/wav", "audio/ogg", "audio/mpeg"})


class SettingType(str, Enum):
    """Storage type of an SEO setting value."""

    STRING = "string"
    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    JSON = "json"


class TeamRole(str, Enum):
    """Role of a member inside a team."""

    MEMBER = "member"
    ADMIN = "admin"


class CommentAuthorType(str, Enum):
    """Comment list filter on who wrote the comment."""

    REGISTERED = "registered"
    GUEST = "guest"


class Slug(RootValueObject[str]):
    """URL-safe slug.

    Must be lowercase, alphanumeric with hyphens, 1-255 characters.
    Examples: 'sea-view-apartment', 'sea-view-apartment-1'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 255:
            raise ValueError("Slug must be 1-255 characters")
        return v
