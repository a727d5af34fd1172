"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from estate.config import Settings
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
from estate.persistence.database import create_engine, create_session_factory
from estate.persistence.repository import (
    PostgresAgentRepository,
    PostgresAmenityRepository,
    PostgresCategoryRepository,
    PostgresCommentRepository,
    PostgresLocationRepository,
    PostgresMediaRepository,
    PostgresPostRepository,
    PostgresPropertyRepository,
    PostgresPropertyTypeRepository,
    PostgresSeoSettingRepository,
    PostgresTagRepository,
    PostgresTeamRepository,
    PostgresUserRepository,
)
from estate.util.di.base import ProviderBase
from estate.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        A comment status change and its counter updates share this session,
        so they commit or roll back together.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    # Catalog
    @provide(scope=Scope.REQUEST)
    def get_agent_repository(self, session: AsyncSession) -> AgentRepository:
        return PostgresAgentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_amenity_repository(self, session: AsyncSession) -> AmenityRepository:
        return PostgresAmenityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_location_repository(self, session: AsyncSession) -> LocationRepository:
        return PostgresLocationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_property_type_repository(
        self, session: AsyncSession
    ) -> PropertyTypeRepository:
        return PostgresPropertyTypeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_property_repository(self, session: AsyncSession) -> PropertyRepository:
        return PostgresPropertyRepository(session)

    # Blog
    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_category_repository(self, session: AsyncSession) -> CategoryRepository:
        return PostgresCategoryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_media_repository(self, session: AsyncSession) -> MediaRepository:
        return PostgresMediaRepository(session)

    # Admin
    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_team_repository(self, session: AsyncSession) -> TeamRepository:
        return PostgresTeamRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_seo_setting_repository(
        self, session: AsyncSession
    ) -> SeoSettingRepository:
        return PostgresSeoSettingRepository(session)
