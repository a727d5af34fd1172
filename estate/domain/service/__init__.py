"""Domain services."""

from .base import CrudService, Service
from .catalog_service import (
    AgentService,
    AmenityService,
    LocationService,
    PropertyTypeService,
)
from .comment_service import CommentAnalytics, CommentService, CommentStats
from .file_storage import FileStorage
from .jwt_service import JWTService
from .media_service import MediaService, MediaStats
from .moderation import removal_delta, transition_delta
from .post_service import CategoryService, PostService, PostStats, TagService
from .property_service import PropertyService
from .seo_service import (
    PostMeta,
    SeoAnalysis,
    SeoSettingCache,
    SeoSettingService,
    SettingUpdate,
)
from .slug_service import SlugService, slugify
from .user_service import TeamService, UserService

__all__ = [
    "AgentService",
    "AmenityService",
    "CategoryService",
    "CommentAnalytics",
    "CommentService",
    "CommentStats",
    "CrudService",
    "FileStorage",
    "JWTService",
    "LocationService",
    "MediaService",
    "MediaStats",
    "PostMeta",
    "PostService",
    "PostStats",
    "PropertyService",
    "PropertyTypeService",
    "SeoAnalysis",
    "SeoSettingCache",
    "SeoSettingService",
    "Service",
    "SettingUpdate",
    "SlugService",
    "TagService",
    "TeamService",
    "UserService",
    "removal_delta",
    "slugify",
    "transition_delta",
]
