"""PostgreSQL implementation of Like repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from feed.domain.model import Like
from feed.domain.repository import LikeRepository
from feed.domain.value import LikeableKind, LikeTarget, UserId
from feed.persistence.mappers import like_to_dict, row_to_like
from feed.persistence.tables import likes_table


def _matches_target(target: LikeTarget):
    return and_(
        likes_table.c.likeable_kind == target.kind.value,
        likes_table.c.likeable_id == target.id,
    )


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_owner_and_target(
        self, owner_id: UserId, target: LikeTarget
    ) -> Optional[Like]:
        """Find a user's like on a specific target."""
        stmt = select(likes_table).where(
            and_(likes_table.c.owner_id == owner_id, _matches_target(target))
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_like(dict(row)) if row else None

    async def find_by_target(self, target: LikeTarget) -> List[Like]:
        """Find all likes on a target in insertion order."""
        stmt = (
            select(likes_table)
            .where(_matches_target(target))
            .order_by(likes_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_like(dict(row)) for row in result.mappings().all()]

    async def find_by_targets(
        self, kind: LikeableKind, target_ids: Sequence[UUID]
    ) -> List[Like]:
        """Find all likes on several targets of one kind (batch query)."""
        if not target_ids:
            return []

        stmt = (
            select(likes_table)
            .where(
                and_(
                    likes_table.c.likeable_kind == kind.value,
                    likes_table.c.likeable_id.in_(target_ids),
                )
            )
            .order_by(likes_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_like(dict(row)) for row in result.mappings().all()]

    async def count_by_target(self, target: LikeTarget) -> int:
        """Count likes on a target."""
        stmt = select(func.count()).where(_matches_target(target))
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def add_if_absent(self, like: Like) -> bool:
        """Insert a like, deferring to the unique constraint on conflict.

        Uses INSERT ... ON CONFLICT DO NOTHING so concurrent toggles resolve
        inside the database instead of raising.
        """
        stmt = (
            insert(likes_table)
            .values(**like_to_dict(like))
            .on_conflict_do_nothing(constraint="uq_like_owner_target")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_owner_and_target(
        self, owner_id: UserId, target: LikeTarget
    ) -> bool:
        """Delete a user's like on a target."""
        stmt = delete(likes_table).where(
            and_(likes_table.c.owner_id == owner_id, _matches_target(target))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_targets(
        self, kind: LikeableKind, target_ids: Sequence[UUID]
    ) -> int:
        """Delete every like on several targets of one kind."""
        if not target_ids:
            return 0

        stmt = delete(likes_table).where(
            and_(
                likes_table.c.likeable_kind == kind.value,
                likes_table.c.likeable_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
