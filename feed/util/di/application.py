"""Application layer DI providers."""

from dishka import Scope, provide

from feed.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from feed.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from feed.application.usecase.like import ToggleLikeUseCase
from feed.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    PostAssembler,
    UpdatePostUseCase,
)
from feed.config import MediaSettings
from feed.domain.service import (
    CommentService,
    JWTService,
    LikeService,
    MediaStorage,
    PostService,
    UserService,
)
from feed.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_post_assembler(
        self,
        user_service: UserService,
        like_service: LikeService,
        comment_service: CommentService,
        media_storage: MediaStorage,
    ) -> PostAssembler:
        """Provide post view assembler."""
        return PostAssembler(
            user_service=user_service,
            like_service=like_service,
            comment_service=comment_service,
            media_storage=media_storage,
        )

    # Auth use cases
    @provide
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self,
        post_service: PostService,
        media_storage: MediaStorage,
        media_settings: MediaSettings,
        assembler: PostAssembler,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            media_storage=media_storage,
            media_settings=media_settings,
            assembler=assembler,
        )

    @provide
    def get_get_post_use_case(
        self, post_service: PostService, assembler: PostAssembler
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, assembler=assembler)

    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, assembler: PostAssembler
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, assembler=assembler)

    @provide
    def get_update_post_use_case(
        self, post_service: PostService, assembler: PostAssembler
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, assembler=assembler)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        assembler: PostAssembler,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            assembler=assembler,
        )

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Like use cases
    @provide
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)
