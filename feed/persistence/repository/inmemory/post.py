"""In-memory post repository for testing."""

from typing import Optional

from feed.domain.model.post import Post
from feed.domain.repository.post import PostRepository
from feed.domain.value import PostId, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._store.posts.get(post_id)

    async def find_visible_to(self, viewer_id: UserId) -> list[Post]:
        """Find public posts plus the viewer's private posts, newest first."""
        visible = [p for p in self._store.posts.values() if p.is_visible_to(viewer_id)]
        return sorted(visible, key=lambda p: p.created_at, reverse=True)

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._store.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._store.posts.pop(post_id, None)
