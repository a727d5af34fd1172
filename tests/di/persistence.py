"""Mock persistence providers for testing."""

from dishka import Scope, provide

from estate.domain.repository import (
    AgentRepository,
    AmenityRepository,
    CategoryRepository,
    CommentRepository,
    LocationRepository,
    MediaRepository,
    PostRepository,
    PropertyRepository,
    PropertyTypeRepository,
    SeoSettingRepository,
    TagRepository,
    TeamRepository,
    UserRepository,
)
from estate.persistence.repository.inmemory import (
    InMemoryAgentRepository,
    InMemoryAmenityRepository,
    InMemoryCategoryRepository,
    InMemoryCommentRepository,
    InMemoryLocationRepository,
    InMemoryMediaRepository,
    InMemoryPostRepository,
    InMemoryPropertyRepository,
    InMemoryPropertyTypeRepository,
    InMemorySeoSettingRepository,
    InMemoryTagRepository,
    InMemoryTeamRepository,
    InMemoryUserRepository,
)
from estate.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so several HTTP requests against one test
    client see the same data. Every test builds its own container, which
    keeps tests isolated.
    """

    __is_mock__ = True

    scope = Scope.APP

    @provide
    def get_agent_repository(self) -> AgentRepository:
        return InMemoryAgentRepository()

    @provide
    def get_amenity_repository(self) -> AmenityRepository:
        return InMemoryAmenityRepository()

    @provide
    def get_location_repository(self) -> LocationRepository:
        return InMemoryLocationRepository()

    @provide
    def get_property_type_repository(self) -> PropertyTypeRepository:
        return InMemoryPropertyTypeRepository()

    @provide
    def get_property_repository(self) -> PropertyRepository:
        return InMemoryPropertyRepository()

    @provide
    def get_post_repository(self) -> PostRepository:
        return InMemoryPostRepository()

    @provide
    def get_tag_repository(self) -> TagRepository:
        return InMemoryTagRepository()

    @provide
    def get_category_repository(self) -> CategoryRepository:
        return InMemoryCategoryRepository()

    @provide
    def get_comment_repository(self) -> CommentRepository:
        return InMemoryCommentRepository()

    @provide
    def get_media_repository(self) -> MediaRepository:
        return InMemoryMediaRepository()

    @provide
    def get_user_repository(self) -> UserRepository:
        return InMemoryUserRepository()

    @provide
    def get_team_repository(self) -> TeamRepository:
        return InMemoryTeamRepository()

    @provide
    def get_seo_setting_repository(self) -> SeoSettingRepository:
        return InMemorySeoSettingRepository()
