"""Like domain service.

Likes attach to posts and comments through one tagged target, so every
operation here works for both kinds without branching beyond the existence
check.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Sequence
from uuid import UUID, uuid4

import logfire

from feed.domain.error import NotFoundError
from feed.domain.model import Like
from feed.domain.repository import CommentRepository, LikeRepository, PostRepository
from feed.domain.value import (
    LikeableKind,
    LikeId,
    LikeTarget,
    PostTarget,
    UserId,
)

from .base import Service
from .user_service import UserService


@dataclass
class Liker:
    """A user who liked something, as shown in "liked by" lists."""

    user_id: UserId
    name: str


@dataclass
class LikeSummary:
    """Derived like state for one target as seen by one viewer."""

    count: int = 0
    is_liked: bool = False
    likers: list[Liker] = field(default_factory=list)


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(
        self,
        like_repository: LikeRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        user_service: UserService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_repository: Post repository (target existence checks)
            comment_repository: Comment repository (target existence checks)
            user_service: User domain service (liker names)
        """
        self.like_repository = like_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.user_service = user_service

    async def toggle(self, actor_id: UserId, target: LikeTarget) -> bool:
        """Like the target if the actor hasn't yet, otherwise unlike it.

        The insert defers to the (owner, kind, id) unique constraint, so two
        concurrent toggles can never leave two rows behind. Losing that race
        still reports liked, because a like exists afterwards.

        Args:
            actor_id: User toggling the like
            target: Post or comment to toggle

        Returns:
            True if the target is now liked, False if it was unliked

        Raises:
            NotFoundError: If the target doesn't exist or sits on a post the
                actor can't see
        """
        with logfire.span(
            "like_service.toggle",
            actor_id=str(actor_id),
            kind=target.kind.value,
            target_id=str(target.id),
        ):
            await self._ensure_target_exists(target, actor_id)

            removed = await self.like_repository.delete_by_owner_and_target(
                actor_id, target
            )
            if removed:
                logfire.info(
                    "Like removed",
                    actor_id=str(actor_id),
                    kind=target.kind.value,
                    target_id=str(target.id),
                )
                return False

            like = Like(
                id=LikeId(uuid4()),
                owner_id=actor_id,
                target=target,
                created_at=datetime.now(timezone.utc),
            )
            inserted = await self.like_repository.add_if_absent(like)
            if inserted:
                logfire.info(
                    "Like added",
                    actor_id=str(actor_id),
                    kind=target.kind.value,
                    target_id=str(target.id),
                )
            else:
                logfire.warn(
                    "Concurrent like already recorded",
                    actor_id=str(actor_id),
                    kind=target.kind.value,
                    target_id=str(target.id),
                )
            return True

    async def count(self, target: LikeTarget) -> int:
        """Number of likes on a target."""
        return await self.like_repository.count_by_target(target)

    async def is_liked_by(self, actor_id: UserId, target: LikeTarget) -> bool:
        """Whether the actor has liked the target."""
        like = await self.like_repository.find_by_owner_and_target(actor_id, target)
        return like is not None

    async def likers(self, target: LikeTarget) -> list[Liker]:
        """Users who liked the target, in the order they liked it."""
        likes = await self.like_repository.find_by_target(target)
        return await self._to_likers(likes)

    async def summarize(self, target: LikeTarget, viewer_id: UserId) -> LikeSummary:
        """Count, viewer state and likers for a single target.

        Args:
            target: Post or comment
            viewer_id: User the summary is computed for

        Returns:
            Like summary for the target
        """
        with logfire.span(
            "like_service.summarize",
            kind=target.kind.value,
            target_id=str(target.id),
        ):
            likes = await self.like_repository.find_by_target(target)
            return LikeSummary(
                count=len(likes),
                is_liked=any(like.owner_id == viewer_id for like in likes),
                likers=await self._to_likers(likes),
            )

    async def summarize_many(
        self, kind: LikeableKind, target_ids: Sequence[UUID], viewer_id: UserId
    ) -> dict[UUID, LikeSummary]:
        """Like summaries for many targets of one kind (batch query).

        Args:
            kind: Type shared by all targets
            target_ids: IDs of the targets
            viewer_id: User the summaries are computed for

        Returns:
            Mapping of target ID to summary; targets without likes get an
            empty summary
        """
        if not target_ids:
            return {}

        with logfire.span(
            "like_service.summarize_many", kind=kind.value, targets=len(target_ids)
        ):
            likes = await self.like_repository.find_by_targets(kind, target_ids)
            users = await self.user_service.get_many([like.owner_id for like in likes])

            summaries = {target_id: LikeSummary() for target_id in target_ids}
            for like in likes:
                summary = summaries.get(like.target.id)
                if summary is None:
                    continue
                summary.count += 1
                if like.owner_id == viewer_id:
                    summary.is_liked = True
                user = users.get(like.owner_id)
                if user:
                    summary.likers.append(Liker(user.id, user.display_name))
            return summaries

    async def delete_for_targets(
        self, kind: LikeableKind, target_ids: Sequence[UUID]
    ) -> int:
        """Remove every like on the given targets.

        Args:
            kind: Type shared by all targets
            target_ids: IDs of the targets

        Returns:
            Number of likes removed
        """
        if not target_ids:
            return 0

        with logfire.span(
            "like_service.delete_for_targets", kind=kind.value, targets=len(target_ids)
        ):
            deleted = await self.like_repository.delete_by_targets(kind, target_ids)
            logfire.info("Likes deleted", kind=kind.value, count=deleted)
            return deleted

    async def _ensure_target_exists(self, target: LikeTarget, actor_id: UserId) -> None:
        # Targets on posts the actor can't see are treated as missing
        if isinstance(target, PostTarget):
            resource = "Post"
            post = await self.post_repository.find_by_id(target.id)
        else:
            resource = "Comment"
            post = None
            comment = await self.comment_repository.find_by_id(target.id)
            if comment:
                post = await self.post_repository.find_by_id(comment.post_id)

        if not post or not post.is_visible_to(actor_id):
            logfire.warn(
                "Like on non-existent target",
                kind=target.kind.value,
                target_id=str(target.id),
            )
            raise NotFoundError(resource, str(target.id))

    async def _to_likers(self, likes: Sequence[Like]) -> list[Liker]:
        users = await self.user_service.get_many([like.owner_id for like in likes])
        return [
            Liker(users[like.owner_id].id, users[like.owner_id].display_name)
            for like in likes
            if like.owner_id in users
        ]
