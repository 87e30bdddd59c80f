"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from feed.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from feed.domain.error import DomainError
from feed.domain.service import JWTService
from feed.interface.api.security import require_user_id
from feed.interface.error import http_error, invalid_identifier

router = APIRouter(prefix="/likes", tags=["likes"], route_class=DishkaRoute)


class ToggleLikeAPIRequest(BaseModel):
    """API request for toggling a like."""

    likeable_type: str  # "post" or "comment"
    likeable_id: str


@router.post("/toggle", response_model=ToggleLikeResponse)
async def toggle_like(
    body: ToggleLikeAPIRequest,
    request: Request,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
) -> ToggleLikeResponse:
    """Like a post or comment, or remove the like if it already exists.

    Requires authentication.

    Returns:
        Whether the target is now liked, and its like count

    Raises:
        HTTPException: 422 for an unknown likeable_type, 404 for a missing target
    """
    user_id = require_user_id(request, jwt_service, "like content")

    try:
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(
                user_id=user_id,
                likeable_type=body.likeable_type,
                likeable_id=body.likeable_id,
            )
        )
    except DomainError as e:
        raise http_error(e, "Like toggle")
    except ValueError as e:
        raise invalid_identifier(e)
