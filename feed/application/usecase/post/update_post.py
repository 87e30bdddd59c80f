"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.domain.service import PostService
from feed.domain.value import PostId, UserId, Visibility

from .assemble import PostAssembler, PostView


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None are not changed.
    """

    post_id: str
    user_id: str  # User ID from authenticated user
    content: str | None = None
    visibility: Visibility | None = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    message: str = "Post updated successfully"
    post: PostView


class UpdatePostUseCase:
    """Use case for updating a post's content or visibility."""

    def __init__(self, post_service: PostService, assembler: PostAssembler) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            assembler: Post view assembler
        """
        self.post_service = post_service
        self.assembler = assembler

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            AuthorizationError: If the user doesn't own the post
            ValidationError: If the new content is empty
        """
        user_id = UserId(UUID(request.user_id))
        post = await self.post_service.update_post(
            PostId(UUID(request.post_id)),
            user_id,
            content=request.content,
            visibility=request.visibility,
        )
        return UpdatePostResponse(post=await self.assembler.assemble(post, user_id))
