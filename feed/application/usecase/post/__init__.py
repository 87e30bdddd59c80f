"""Post use cases."""

from .assemble import (
    CommentView,
    LikerView,
    PostAssembler,
    PostView,
    comment_view,
)
from .create_post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    MediaUpload,
)
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "CommentView",
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "LikerView",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "MediaUpload",
    "PostAssembler",
    "PostView",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
    "comment_view",
]
