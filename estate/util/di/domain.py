"""Domain layer DI providers."""

from dishka import Scope, provide

from estate.config import AuthSettings, StorageSettings
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
from estate.domain.service import (
    AgentService,
    AmenityService,
    CategoryService,
    CommentService,
    FileStorage,
    JWTService,
    LocationService,
    MediaService,
    PostService,
    PropertyService,
    PropertyTypeService,
    SeoSettingCache,
    SeoSettingService,
    SlugService,
    TagService,
    TeamService,
    UserService,
)
from estate.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_slug_service(self) -> SlugService:
        """Provide slug service."""
        return SlugService()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT service."""
        return JWTService(auth_settings)

    # Catalog
    @provide
    def get_agent_service(
        self,
        agent_repository: AgentRepository,
        property_repository: PropertyRepository,
        file_storage: FileStorage,
        storage_settings: StorageSettings,
    ) -> AgentService:
        """Provide agent service."""
        return AgentService(
            agent_repository,
            property_repository,
            file_storage,
            storage_settings.max_upload_bytes,
        )

    @provide
    def get_amenity_service(
        self,
        amenity_repository: AmenityRepository,
        property_repository: PropertyRepository,
        slug_service: SlugService,
    ) -> AmenityService:
        """Provide amenity service."""
        return AmenityService(amenity_repository, property_repository, slug_service)

    @provide
    def get_location_service(
        self,
        location_repository: LocationRepository,
        property_repository: PropertyRepository,
        slug_service: SlugService,
    ) -> LocationService:
        """Provide location service."""
        return LocationService(location_repository, property_repository, slug_service)

    @provide
    def get_property_type_service(
        self,
        property_type_repository: PropertyTypeRepository,
        property_repository: PropertyRepository,
        slug_service: SlugService,
    ) -> PropertyTypeService:
        """Provide property type service."""
        return PropertyTypeService(
            property_type_repository, property_repository, slug_service
        )

    @provide
    def get_property_service(
        self,
        property_repository: PropertyRepository,
        property_type_repository: PropertyTypeRepository,
        location_repository: LocationRepository,
        agent_repository: AgentRepository,
        amenity_repository: AmenityRepository,
        slug_service: SlugService,
    ) -> PropertyService:
        """Provide property service."""
        return PropertyService(
            property_repository,
            property_type_repository,
            location_repository,
            agent_repository,
            amenity_repository,
            slug_service,
        )

    # Blog
    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        tag_repository: TagRepository,
        slug_service: SlugService,
    ) -> PostService:
        """Provide post service."""
        return PostService(post_repository, tag_repository, slug_service)

    @provide
    def get_tag_service(
        self, tag_repository: TagRepository, slug_service: SlugService
    ) -> TagService:
        """Provide tag service."""
        return TagService(tag_repository, slug_service)

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository, slug_service: SlugService
    ) -> CategoryService:
        """Provide category service."""
        return CategoryService(category_repository, slug_service)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> CommentService:
        """Provide comment service."""
        return CommentService(comment_repository, post_repository)

    @provide
    def get_media_service(
        self,
        media_repository: MediaRepository,
        file_storage: FileStorage,
        storage_settings: StorageSettings,
    ) -> MediaService:
        """Provide media service."""
        return MediaService(
            media_repository, file_storage, storage_settings.max_upload_bytes
        )

    # Admin
    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user service."""
        return UserService(user_repository)

    @provide
    def get_team_service(
        self, team_repository: TeamRepository, user_repository: UserRepository
    ) -> TeamService:
        """Provide team service."""
        return TeamService(team_repository, user_repository)

    @provide
    def get_seo_setting_service(
        self,
        seo_setting_repository: SeoSettingRepository,
        cache: SeoSettingCache,
    ) -> SeoSettingService:
        """Provide SEO setting service."""
        return SeoSettingService(seo_setting_repository, cache)
