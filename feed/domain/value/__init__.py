"""Domain value objects for the feed."""

from feed.domain.value.identifiers import CommentId, LikeId, PostId, UserId
from feed.domain.value.types import (
    CommentTarget,
    LikeableKind,
    LikeTarget,
    PostTarget,
    Visibility,
    make_like_target,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "LikeId",
    # Types
    "Visibility",
    "LikeableKind",
    "LikeTarget",
    "PostTarget",
    "CommentTarget",
    "make_like_target",
]
