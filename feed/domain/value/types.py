"""Domain value objects for the feed.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import Field

from feed.domain.error import ValidationError
from feed.domain.value.common import ValueObject
from feed.domain.value.identifiers import CommentId, PostId


class Visibility(str, Enum):
    """Who can see a post.

    Public posts are visible to everyone, private posts only to their owner.
    """

    PUBLIC = "public"
    PRIVATE = "private"


class LikeableKind(str, Enum):
    """Type of entity that can be liked."""

    POST = "post"
    COMMENT = "comment"


class PostTarget(ValueObject):
    """A like attached to a post."""

    kind: Literal[LikeableKind.POST] = LikeableKind.POST
    id: PostId


class CommentTarget(ValueObject):
    """A like attached to a comment."""

    kind: Literal[LikeableKind.COMMENT] = LikeableKind.COMMENT
    id: CommentId


# Tagged variant: kind and id always travel together
LikeTarget = Annotated[Union[PostTarget, CommentTarget], Field(discriminator="kind")]


def make_like_target(kind: str | LikeableKind, target_id: UUID) -> LikeTarget:
    """Build a like target from a raw kind tag and id.

    Args:
        kind: "post" or "comment"
        target_id: ID of the post or comment

    Returns:
        PostTarget or CommentTarget

    Raises:
        ValidationError: If kind is not a likeable kind
    """
    try:
        likeable_kind = LikeableKind(kind)
    except ValueError:
        raise ValidationError(f"Unsupported like target kind: {kind}")

    if likeable_kind is LikeableKind.POST:
        return PostTarget(id=PostId(target_id))
    return CommentTarget(id=CommentId(target_id))
