"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from feed.domain.model.like import Like
from feed.domain.value import LikeableKind, LikeTarget, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    Likes are stored with a (likeable_kind, likeable_id) pair; a unique
    constraint on (owner_id, likeable_kind, likeable_id) guarantees at most
    one like per user per target.
    """

    @abstractmethod
    async def find_by_owner_and_target(
        self, owner_id: UserId, target: LikeTarget
    ) -> Optional[Like]:
        """Find a user's like on a specific target.

        Args:
            owner_id: The user's ID
            target: Post or comment target

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_target(self, target: LikeTarget) -> List[Like]:
        """Find all likes on a target in insertion order.

        Args:
            target: Post or comment target

        Returns:
            Likes ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_by_targets(
        self, kind: LikeableKind, target_ids: Sequence[UUID]
    ) -> List[Like]:
        """Find all likes on several targets of one kind (batch query).

        Args:
            kind: Type of the targets
            target_ids: IDs of the targets

        Returns:
            Likes ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def count_by_target(self, target: LikeTarget) -> int:
        """Count likes on a target.

        Args:
            target: Post or comment target

        Returns:
            Number of likes
        """
        pass

    @abstractmethod
    async def add_if_absent(self, like: Like) -> bool:
        """Insert a like unless the owner already likes the target.

        Must be atomic with respect to concurrent inserts for the same
        (owner, target): the storage constraint decides the winner.

        Args:
            like: The like to insert

        Returns:
            True if a row was inserted, False if one already existed
        """
        pass

    @abstractmethod
    async def delete_by_owner_and_target(
        self, owner_id: UserId, target: LikeTarget
    ) -> bool:
        """Delete a user's like on a target.

        Args:
            owner_id: The user's ID
            target: Post or comment target

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_targets(
        self, kind: LikeableKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every like on several targets of one kind.

        Args:
            kind: Type of the targets
            target_ids: IDs of the targets

        Returns:
            Number of likes deleted
        """
        pass
