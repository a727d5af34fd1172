"""Application layer DI providers."""

from dishka import Scope, provide

from estate.application.usecase.comment import (
    BulkCommentActionUseCase,
    CommentAnalyticsUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    ModerationQueueUseCase,
)
from estate.application.usecase.media import ListMediaUseCase
from estate.application.usecase.post import (
    ListPostsUseCase,
    PostSeoMetaUseCase,
    UploadFeaturedImageUseCase,
)
from estate.domain.service import (
    CategoryService,
    CommentService,
    MediaService,
    PostService,
    SeoSettingService,
    UserService,
)
from estate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_bulk_comment_action_use_case(
        self, comment_service: CommentService
    ) -> BulkCommentActionUseCase:
        """Provide bulk comment action use case."""
        return BulkCommentActionUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetCommentUseCase:
        """Provide show comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_moderation_queue_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> ModerationQueueUseCase:
        """Provide moderation queue use case."""
        return ModerationQueueUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_analytics_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> CommentAnalyticsUseCase:
        """Provide comment analytics use case."""
        return CommentAnalyticsUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_upload_featured_image_use_case(
        self, post_service: PostService, media_service: MediaService
    ) -> UploadFeaturedImageUseCase:
        """Provide featured image upload use case."""
        return UploadFeaturedImageUseCase(
            post_service=post_service, media_service=media_service
        )

    @provide(scope=Scope.REQUEST)
    def get_post_seo_meta_use_case(
        self,
        post_service: PostService,
        category_service: CategoryService,
        media_service: MediaService,
        seo_setting_service: SeoSettingService,
    ) -> PostSeoMetaUseCase:
        """Provide post SEO meta use case."""
        return PostSeoMetaUseCase(
            post_service=post_service,
            category_service=category_service,
            media_service=media_service,
            seo_setting_service=seo_setting_service,
        )

    # Media use cases
    @provide(scope=Scope.REQUEST)
    def get_list_media_use_case(self, media_service: MediaService) -> ListMediaUseCase:
        """Provide list media use case."""
        return ListMediaUseCase(media_service=media_service)
