"""Domain services."""

from .base import Service
from .comment_service import CommentNode, CommentService
from .jwt_service import JWTService
from .like_service import LikeService, LikeSummary, Liker
from .post_service import PostService
from .storage import MediaStorage
from .user_service import UserService

__all__ = [
    "CommentNode",
    "CommentService",
    "JWTService",
    "LikeService",
    "LikeSummary",
    "Liker",
    "MediaStorage",
    "PostService",
    "Service",
    "UserService",
]
