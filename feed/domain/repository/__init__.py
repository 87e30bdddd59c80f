"""Repository interfaces for the feed domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from feed.domain.repository.comment import CommentRepository
from feed.domain.repository.like import LikeRepository
from feed.domain.repository.post import PostRepository
from feed.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
]
