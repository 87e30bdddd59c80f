"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from feed.application.usecase.base import BaseUseCase
from feed.domain.service import LikeService
from feed.domain.value import UserId, make_like_target


class ToggleLikeRequest(BaseModel):
    """Toggle like request.

    likeable_type is the raw tag from the client ("post" or "comment");
    anything else is rejected by the use case.
    """

    user_id: str  # User ID from authenticated user
    likeable_type: str
    likeable_id: str


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    liked: bool
    likes_count: int
    message: str


class ToggleLikeUseCase(BaseUseCase[ToggleLikeRequest, ToggleLikeResponse]):
    """Use case for liking or unliking a post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Args:
            request: Toggle like request

        Returns:
            New like state and count for the target

        Raises:
            ValidationError: If likeable_type is not post or comment
            NotFoundError: If the target doesn't exist
        """
        target = make_like_target(request.likeable_type, UUID(request.likeable_id))
        liked = await self.like_service.toggle(UserId(UUID(request.user_id)), target)
        return ToggleLikeResponse(
            liked=liked,
            likes_count=await self.like_service.count(target),
            message="Liked" if liked else "Unliked",
        )
