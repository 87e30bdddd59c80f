"""Like entity.

A like is a polymorphic reaction: the same entity attaches to either a post
or a comment through its tagged target.
"""

from datetime import datetime, timezone

from pydantic import Field

from feed.domain.model.common import DomainModel
from feed.domain.value import LikeId, LikeTarget, UserId


class Like(DomainModel):
    """Like entity.

    Business rules:
    - One like per user per target (enforced by database unique constraint)
    - The target must exist when the like is written
    """

    id: LikeId
    owner_id: UserId
    target: LikeTarget
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
