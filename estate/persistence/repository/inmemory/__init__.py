"""In-memory repository implementations for testing."""

from estate.persistence.repository.inmemory.agent import InMemoryAgentRepository
from estate.persistence.repository.inmemory.catalog import (
    InMemoryAmenityRepository,
    InMemoryLocationRepository,
    InMemoryPropertyTypeRepository,
)
from estate.persistence.repository.inmemory.comment import InMemoryCommentRepository
from estate.persistence.repository.inmemory.media import InMemoryMediaRepository
from estate.persistence.repository.inmemory.post import (
    InMemoryCategoryRepository,
    InMemoryPostRepository,
    InMemoryTagRepository,
)
from estate.persistence.repository.inmemory.property import (
    InMemoryPropertyRepository,
)
from estate.persistence.repository.inmemory.seo_setting import (
    InMemorySeoSettingRepository,
)
from estate.persistence.repository.inmemory.user import (
    InMemoryTeamRepository,
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryAgentRepository",
    "InMemoryAmenityRepository",
    "InMemoryCategoryRepository",
    "InMemoryCommentRepository",
    "InMemoryLocationRepository",
    "InMemoryMediaRepository",
    "InMemoryPostRepository",
    "InMemoryPropertyRepository",
    "InMemoryPropertyTypeRepository",
    "InMemorySeoSettingRepository",
    "InMemoryTagRepository",
    "InMemoryTeamRepository",
    "InMemoryUserRepository",
]
