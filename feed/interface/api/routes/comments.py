"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from feed.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from feed.domain.error import DomainError
from feed.domain.service import JWTService
from feed.interface.api.security import require_user_id
from feed.interface.error import http_error, invalid_identifier

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    body: CreateCommentAPIRequest,
    request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> CreateCommentResponse:
    """Comment on a post or reply to a comment.

    Requires authentication.

    Args:
        post_id: Post UUID
        body: Comment content and optional parent comment ID
        request: Incoming request (carries the auth token)
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)

    Returns:
        The created comment and the refreshed post

    Raises:
        HTTPException: If not authenticated, the post or parent is missing,
            or the reply is not allowed
    """
    user_id = require_user_id(request, jwt_service, "create comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id,
                author_id=user_id,
                content=body.content,
                parent_id=body.parent_id,
            )
        )
    except DomainError as e:
        raise http_error(e, "Comment creation")
    except ValueError as e:
        raise invalid_identifier(e)


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    request: Request,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
) -> GetCommentsResponse:
    """Comment tree of a post, oldest first, replies nested."""
    user_id = require_user_id(request, jwt_service, "view comments")

    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(post_id=post_id, viewer_id=user_id)
        )
    except DomainError as e:
        raise http_error(e, "Comment listing")
    except ValueError as e:
        raise invalid_identifier(e)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
) -> DeleteCommentResponse:
    """Delete a comment and its replies.

    Only the comment author can delete.
    """
    user_id = require_user_id(request, jwt_service, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except DomainError as e:
        raise http_error(e, "Comment deletion")
    except ValueError as e:
        raise invalid_identifier(e)
