"""Comment entity.

Comments hang off a post; a comment with a parent is a reply. The parent
always belongs to the same post, so a post's comments form a forest that
can be loaded flat and linked by id.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from feed.domain.model.common import DomainModel
from feed.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)
    """

    id: CommentId
    post_id: PostId
    owner_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None
