"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from feed.domain.model.post import Post
from feed.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_visible_to(self, viewer_id: UserId) -> List[Post]:
        """Find every post the viewer may see, newest first.

        Visible means public, or private and owned by the viewer.

        Args:
            viewer_id: The viewing user's ID

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete
        """
        pass
