"""Domain layer DI providers."""

from dishka import Scope, provide

from feed.config import AuthSettings, Settings
from feed.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from feed.domain.service import (
    CommentService,
    JWTService,
    LikeService,
    MediaStorage,
    PostService,
    UserService,
)
from feed.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        user_service: UserService,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            post_repository=post_repository,
            comment_repository=comment_repository,
            user_service=user_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        like_service: LikeService,
        user_service: UserService,
        settings: Settings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            like_service=like_service,
            user_service=user_service,
            max_depth=settings.comments.max_depth,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_service: CommentService,
        like_service: LikeService,
        media_storage: MediaStorage,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            comment_service=comment_service,
            like_service=like_service,
            media_storage=media_storage,
        )
