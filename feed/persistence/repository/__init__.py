"""PostgreSQL repository implementations."""

from feed.persistence.repository.comment import PostgresCommentRepository
from feed.persistence.repository.like import PostgresLikeRepository
from feed.persistence.repository.post import PostgresPostRepository
from feed.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
]
