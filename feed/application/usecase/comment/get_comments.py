"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.application.usecase.post.assemble import CommentView, comment_view
from feed.domain.service import CommentService, PostService
from feed.domain.value import PostId, UserId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str
    viewer_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentView]


class GetCommentsUseCase:
    """Use case for reading the comment tree of a post."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the post doesn't exist or is hidden from the viewer
        """
        viewer_id = UserId(UUID(request.viewer_id))
        post = await self.post_service.get_visible_post(
            PostId(UUID(request.post_id)), viewer_id
        )
        tree = await self.comment_service.tree_for_post(post.id, viewer_id)
        return GetCommentsResponse(comments=[comment_view(node) for node in tree])
