"""Repository interfaces for the estate domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from estate.domain.repository.agent import AgentRepository
from estate.domain.repository.base import CrudRepository, SluggedRepository
from estate.domain.repository.catalog import (
    AmenityRepository,
    LocationRepository,
    PropertyTypeRepository,
)
from estate.domain.repository.comment import CommentRepository
from estate.domain.repository.media import MediaRepository
from estate.domain.repository.post import (
    CategoryRepository,
    PostRepository,
    TagRepository,
)
from estate.domain.repository.property import PropertyRepository
from estate.domain.repository.seo_setting import SeoSettingRepository
from estate.domain.repository.user import TeamRepository, UserRepository

__all__ = [
    "AgentRepository",
    "AmenityRepository",
    "CategoryRepository",
    "CommentRepository",
    "CrudRepository",
    "LocationRepository",
    "MediaRepository",
    "PostRepository",
    "PropertyRepository",
    "PropertyTypeRepository",
    "SeoSettingRepository",
    "SluggedRepository",
    "TagRepository",
    "TeamRepository",
    "UserRepository",
]
