"""PostgreSQL repository implementations."""

from estate.persistence.repository.agent import PostgresAgentRepository
from estate.persistence.repository.catalog import (
    PostgresAmenityRepository,
    PostgresLocationRepository,
    PostgresPropertyTypeRepository,
)
from estate.persistence.repository.comment import PostgresCommentRepository
from estate.persistence.repository.media import PostgresMediaRepository
from estate.persistence.repository.post import (
    PostgresCategoryRepository,
    PostgresPostRepository,
    PostgresTagRepository,
)
from estate.persistence.repository.property import PostgresPropertyRepository
from estate.persistence.repository.seo_setting import PostgresSeoSettingRepository
from estate.persistence.repository.user import (
    PostgresTeamRepository,
    PostgresUserRepository,
)

__all__ = [
    "PostgresAgentRepository",
    "PostgresAmenityRepository",
    "PostgresCategoryRepository",
    "PostgresCommentRepository",
    "PostgresLocationRepository",
    "PostgresMediaRepository",
    "PostgresPostRepository",
    "PostgresPropertyRepository",
    "PostgresPropertyTypeRepository",
    "PostgresSeoSettingRepository",
    "PostgresTagRepository",
    "PostgresTeamRepository",
    "PostgresUserRepository",
]
