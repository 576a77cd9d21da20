"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, CommentSettings
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from forum.domain.service import (
    CommentService,
    JWTService,
    LikeService,
    NotificationService,
    PostService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services are REQUEST-scoped so they share the request's repositories and
    database session.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        user_repository: UserRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            like_repository=like_repository,
            user_repository=user_repository,
            max_thread_depth=comment_settings.max_thread_depth,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        comment_repository: CommentRepository,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)
