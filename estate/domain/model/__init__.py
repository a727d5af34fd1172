"""Domain model entities for the estate admin."""

from estate.domain.model.agent import Agent
from estate.domain.model.catalog import Amenity, Location, PropertyType
from estate.domain.model.comment import Comment
from estate.domain.model.media import Media
from estate.domain.model.post import Post
from estate.domain.model.property import Property
from estate.domain.model.seo_setting import SeoSetting
from estate.domain.model.tag import Category, Tag
from estate.domain.model.user import Team, TeamMember, User

__all__ = [
    "Agent",
    "Amenity",
    "Category",
    "Comment",
    "Location",
    "Media",
    "Post",
    "Property",
    "PropertyType",
    "SeoSetting",
    "Tag",
    "Team",
    "TeamMember",
    "User",
]
