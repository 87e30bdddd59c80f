"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, Request, UploadFile, status
from pydantic import BaseModel, Field

from feed.adapter.error import AdapterError
from feed.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    MediaUpload,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from feed.domain.error import DomainError
from feed.domain.service import JWTService
from feed.domain.value import Visibility
from feed.interface.api.security import require_user_id
from feed.interface.error import http_error, invalid_identifier, storage_error

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


async def _read_upload(upload: UploadFile | None) -> MediaUpload | None:
    if upload is None or not upload.filename:
        return None
    return MediaUpload(
        filename=upload.filename,
        content_type=upload.content_type or "application/octet-stream",
        content=await upload.read(),
    )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    request: Request,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
) -> ListPostsResponse:
    """The feed: public posts plus the caller's private posts, newest first.

    Requires authentication.
    """
    user_id = require_user_id(request, jwt_service, "view posts")
    return await list_posts_use_case.execute(ListPostsRequest(viewer_id=user_id))


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    content: str = Form(min_length=1, max_length=10000),
    visibility: Visibility = Form(default=Visibility.PUBLIC),
    image: UploadFile | None = File(default=None),
    video: UploadFile | None = File(default=None),
) -> CreatePostResponse:
    """Create a post with optional image and video (multipart form).

    Requires authentication.

    Args:
        request: Incoming request (carries the auth token)
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        content: Post text
        visibility: "public" or "private"
        image: Optional image file (image/*, max 5 MB by default)
        video: Optional video file (mp4/avi/mpeg/quicktime, max 10 MB by default)

    Returns:
        The created post

    Raises:
        HTTPException: If not authenticated, validation fails or media
            can't be stored
    """
    user_id = require_user_id(request, jwt_service, "create posts")

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                owner_id=user_id,
                content=content,
                visibility=visibility,
                image=await _read_upload(image),
                video=await _read_upload(video),
            )
        )
    except DomainError as e:
        raise http_error(e, "Post creation")
    except AdapterError as e:
        raise storage_error(e, "Post creation")


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    request: Request,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
) -> GetPostResponse:
    """Get one post with its comment tree.

    Private posts of other users respond 404.
    """
    user_id = require_user_id(request, jwt_service, "view posts")

    try:
        return await get_post_use_case.execute(
            GetPostRequest(post_id=post_id, viewer_id=user_id)
        )
    except DomainError as e:
        raise http_error(e, "Post lookup")
    except ValueError as e:
        raise invalid_identifier(e)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post.

    Omitted fields are left unchanged.
    """

    content: str | None = Field(default=None, min_length=1, max_length=10000)
    visibility: Visibility | None = None


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: str,
    body: UpdatePostAPIRequest,
    request: Request,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
) -> UpdatePostResponse:
    """Update a post's content and/or visibility.

    Only the post owner can edit.

    Raises:
        HTTPException: If not authenticated, not the owner, or validation fails
    """
    user_id = require_user_id(request, jwt_service, "edit posts")

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                user_id=user_id,
                content=body.content,
                visibility=body.visibility,
            )
        )
    except DomainError as e:
        raise http_error(e, "Post update")
    except ValueError as e:
        raise invalid_identifier(e)


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    request: Request,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
) -> DeletePostResponse:
    """Delete a post with its comments, likes and media.

    Only the post owner can delete.
    """
    user_id = require_user_id(request, jwt_service, "delete posts")

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user_id)
        )
    except DomainError as e:
        raise http_error(e, "Post deletion")
    except ValueError as e:
        raise invalid_identifier(e)
