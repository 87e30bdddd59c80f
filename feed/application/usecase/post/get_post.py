"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.domain.service import PostService
from feed.domain.value import PostId, UserId

from .assemble import PostAssembler, PostView


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str
    viewer_id: str


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostView


class GetPostUseCase:
    """Use case for retrieving one post the viewer may see."""

    def __init__(self, post_service: PostService, assembler: PostAssembler) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            assembler: Post view assembler
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist or is private to someone else
        """
        viewer_id = UserId(UUID(request.viewer_id))
        post = await self.post_service.get_visible_post(
            PostId(UUID(request.post_id)), viewer_id
        )
        return GetPostResponse(post=await self.assembler.assemble(post, viewer_id))
