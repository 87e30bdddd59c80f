"""Post aggregate root.

A post is text content with optional image/video media, owned by exactly
one user and visible either to everyone or only to its owner.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from feed.domain.model.common import DomainModel
from feed.domain.value import PostId, UserId, Visibility


class Post(DomainModel):
    """Post aggregate root.

    Media fields hold opaque storage references, never the bytes.
    Only the owner may change content or visibility, or delete the post.
    """

    id: PostId
    owner_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    image_ref: Optional[str] = None
    video_ref: Optional[str] = None
    visibility: Visibility = Visibility.PUBLIC
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_visible_to(self, viewer_id: UserId) -> bool:
        """Public posts are visible to all; private posts only to the owner."""
        return self.visibility == Visibility.PUBLIC or self.owner_id == viewer_id

    @property
    def media_refs(self) -> list[str]:
        """All attached media references."""
        return [ref for ref in (self.image_ref, self.video_ref) if ref]
