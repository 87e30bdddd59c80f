"""Domain model entities for the feed."""

from feed.domain.model.comment import Comment
from feed.domain.model.like import Like
from feed.domain.model.post import Post
from feed.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Like",
]
