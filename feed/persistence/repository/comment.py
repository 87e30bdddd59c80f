"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from feed.domain.model import Comment
from feed.domain.repository import CommentRepository
from feed.domain.value import CommentId, PostId
from feed.persistence.mappers import comment_to_dict, row_to_comment
from feed.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at.asc(), comments_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_top_level(self, post_id: PostId) -> int:
        """Count comments on a post that are not replies."""
        stmt = select(func.count()).where(
            and_(
                comments_table.c.post_id == post_id,
                comments_table.c.parent_id.is_(None),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)

        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> None:
        """Delete several comments (hard delete)."""
        if not comment_ids:
            return

        stmt = delete(comments_table).where(comments_table.c.id.in_(comment_ids))
        await self.session.execute(stmt)
        await self.session.flush()
