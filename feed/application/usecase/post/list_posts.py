"""List posts use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.domain.service import PostService
from feed.domain.value import UserId

from .assemble import PostAssembler, PostView


class ListPostsRequest(BaseModel):
    """List posts request."""

    viewer_id: str


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]


class ListPostsUseCase:
    """Use case for the feed: every visible post, newest first."""

    def __init__(self, post_service: PostService, assembler: PostAssembler) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            assembler: Post view assembler
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with the viewer's ID

        Returns:
            Public posts plus the viewer's private posts, fully assembled
        """
        viewer_id = UserId(UUID(request.viewer_id))
        posts = await self.post_service.visible_posts(viewer_id)
        return ListPostsResponse(
            posts=await self.assembler.assemble_many(posts, viewer_id)
        )
