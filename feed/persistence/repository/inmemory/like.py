"""In-memory like repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from feed.domain.model.like import Like
from feed.domain.repository.like import LikeRepository
from feed.domain.value import LikeableKind, LikeTarget, UserId

from .store import InMemoryStore


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing.

    Likes are kept in insertion order; ``add_if_absent`` applies the same
    (owner, kind, id) uniqueness the database constraint does.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_owner_and_target(
        self, owner_id: UserId, target: LikeTarget
    ) -> Optional[Like]:
        """Find a user's like on a specific target."""
        for like in self._store.likes:
            if like.owner_id == owner_id and like.target == target:
                return like
        return None

    async def find_by_target(self, target: LikeTarget) -> list[Like]:
        """Find all likes on a target in insertion order."""
        return [like for like in self._store.likes if like.target == target]

    async def find_by_targets(
        self, kind: LikeableKind, target_ids: Sequence[UUID]
    ) -> list[Like]:
        """Find all likes on several targets of one kind."""
        wanted = set(target_ids)
        return [
            like
            for like in self._store.likes
            if like.target.kind == kind and like.target.id in wanted
        ]

    async def count_by_target(self, target: LikeTarget) -> int:
        """Count likes on a target."""
        return sum(1 for like in self._store.likes if like.target == target)

    async def add_if_absent(self, like: Like) -> bool:
        """Insert a like unless the owner already likes the target."""
        if await self.find_by_owner_and_target(like.owner_id, like.target):
            return False
        self._store.likes.append(like)
        return True

    async def delete_by_owner_and_target(
        self, owner_id: UserId, target: LikeTarget
    ) -> bool:
        """Delete a user's like on a target."""
        for i, like in enumerate(self._store.likes):
            if like.owner_id == owner_id and like.target == target:
                self._store.likes.pop(i)
                return True
        return False

    async def delete_by_targets(
        self, kind: LikeableKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every like on several targets of one kind."""
        wanted = set(target_ids)
        kept = [
            like
            for like in self._store.likes
            if not (like.target.kind == kind and like.target.id in wanted)
        ]
        deleted = len(self._store.likes) - len(kept)
        self._store.likes[:] = kept
        return deleted
