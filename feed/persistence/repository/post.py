"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from feed.domain.model import Post
from feed.domain.repository import PostRepository
from feed.domain.value import PostId, UserId, Visibility
from feed.persistence.mappers import post_to_dict, row_to_post
from feed.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def find_visible_to(self, viewer_id: UserId) -> List[Post]:
        """Find public posts plus the viewer's private posts, newest first."""
        stmt = (
            select(posts_table)
            .where(
                or_(
                    posts_table.c.visibility == Visibility.PUBLIC.value,
                    and_(
                        posts_table.c.visibility == Visibility.PRIVATE.value,
                        posts_table.c.owner_id == viewer_id,
                    ),
                )
            )
            .order_by(posts_table.c.created_at.desc(), posts_table.c.id.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        existing = await self.find_by_id(post.id)

        post_dict = post_to_dict(post)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()
