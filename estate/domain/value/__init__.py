"""Domain value objects for the estate admin."""

from estate.domain.value.identifiers import (
    AgentId,
    AmenityId,
    CategoryId,
    CommentId,
    LocationId,
    MediaId,
    PostId,
    PropertyId,
    PropertyTypeId,
    SeoSettingId,
    TagId,
    TeamId,
    UserId,
)
from estate.domain.value.listing import ListQuery, Page, SortDirection
from estate.domain.value.types import (
    BulkCommentAction,
    CommentAuthorType,
    CommentStatus,
    ListingType,
    LocationType,
    MediaType,
    PostStatus,
    PropertyStatus,
    SettingType,
    Slug,
    TeamRole,
)

__all__ = [
    # Identifiers
    "AgentId",
    "AmenityId",
    "CategoryId",
    "CommentId",
    "LocationId",
    "MediaId",
    "PostId",
    "PropertyId",
    "PropertyTypeId",
    "SeoSettingId",
    "TagId",
    "TeamId",
    "UserId",
    # Listing
    "ListQuery",
    "Page",
    "SortDirection",
    # Types
    "BulkCommentAction",
    "CommentAuthorType",
    "CommentStatus",
    "ListingType",
    "LocationType",
    "MediaType",
    "PostStatus",
    "PropertyStatus",
    "SettingType",
    "Slug",
    "TeamRole",
]
