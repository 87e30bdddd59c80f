"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from feed.domain.model.comment import Comment
from feed.domain.repository.comment import CommentRepository
from feed.domain.value import CommentId, PostId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._store.comments.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def count_top_level(self, post_id: PostId) -> int:
        """Count comments on a post that are not replies."""
        return sum(
            1
            for c in self._store.comments.values()
            if c.post_id == post_id and c.parent_id is None
        )

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> None:
        """Delete several comments."""
        for comment_id in comment_ids:
            self._store.comments.pop(comment_id, None)
