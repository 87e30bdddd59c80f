"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.application.usecase.post.assemble import (
    CommentView,
    PostAssembler,
    PostView,
    comment_view,
)
from feed.domain.service import (
    CommentNode,
    CommentService,
    LikeSummary,
    PostService,
    UserService,
)
from feed.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str
    author_id: str  # User ID from authenticated user
    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response.

    Returns the new comment and the refreshed post it belongs to.
    """

    message: str = "Comment added successfully"
    comment: CommentView
    post: PostView


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        assembler: PostAssembler,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            assembler: Post view assembler
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.assembler = assembler

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment and its post

        Raises:
            ValidationError: If content is empty or the parent is invalid
            NotFoundError: If the post or parent comment doesn't exist
        """
        author_id = UserId(UUID(request.author_id))
        post_id = PostId(UUID(request.post_id))

        comment = await self.comment_service.add_comment(
            post_id=post_id,
            author_id=author_id,
            content=request.content,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
        )

        author = await self.user_service.get_by_id(author_id)
        post = await self.post_service.get_post(post_id)

        return CreateCommentResponse(
            comment=comment_view(
                CommentNode(comment=comment, owner=author, likes=LikeSummary())
            ),
            post=await self.assembler.assemble(post, author_id),
        )
