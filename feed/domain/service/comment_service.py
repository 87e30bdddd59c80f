"""Comment domain service."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from feed.domain.error import AuthorizationError, NotFoundError, ValidationError
from feed.domain.model import Comment, User
from feed.domain.repository import CommentRepository, PostRepository
from feed.domain.value import CommentId, LikeableKind, PostId, UserId

from .base import Service
from .like_service import LikeService, LikeSummary
from .user_service import UserService


@dataclass
class CommentNode:
    """Node in a post's comment tree.

    Carries the comment, its owner, the like summary for the viewer the
    tree was built for, and its direct replies in creation order.
    """

    comment: Comment
    owner: User
    likes: LikeSummary
    replies: list["CommentNode"] = field(default_factory=list)

    @property
    def replies_count(self) -> int:
        return len(self.replies)


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        like_service: LikeService,
        user_service: UserService,
        max_depth: int = 1,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository
            like_service: Like domain service
            user_service: User domain service
            max_depth: Deepest reply level allowed (0 disables replies)
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.like_service = like_service
        self.user_service = user_service
        self.max_depth = max_depth

    async def add_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or a reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty, the parent belongs to another
                post, or the reply would be nested too deeply
            NotFoundError: If the post (or parent) doesn't exist or the post
                isn't visible to the author
        """
        with logfire.span(
            "comment_service.add_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if not content or not content.strip():
                raise ValidationError("Comment content must not be empty")

            post = await self.post_repository.find_by_id(post_id)
            if not post or not post.is_visible_to(author_id):
                logfire.warn("Comment on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            depth = 0
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.error(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError("Parent comment does not belong to this post")
                depth = parent.depth + 1
                if depth > self.max_depth:
                    logfire.warn(
                        "Reply too deeply nested",
                        parent_id=str(parent_id),
                        depth=depth,
                        max_depth=self.max_depth,
                    )
                    raise ValidationError("Replies to this comment are not allowed")

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                owner_id=author_id,
                content=content,
                parent_id=parent_id,
                depth=depth,
                created_at=datetime.now(timezone.utc),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def delete_comment(self, comment_id: CommentId, actor_id: UserId) -> int:
        """Delete a comment together with all of its replies and their likes.

        Args:
            comment_id: Comment ID
            actor_id: User requesting the deletion

        Returns:
            Number of comments removed (the comment plus its descendants)

        Raises:
            NotFoundError: If the comment doesn't exist
            AuthorizationError: If the actor doesn't own the comment
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))
            if comment.owner_id != actor_id:
                logfire.warn(
                    "Unauthorized comment deletion",
                    comment_id=str(comment_id),
                    owner_id=str(comment.owner_id),
                    actor_id=str(actor_id),
                )
                raise AuthorizationError("comment", str(comment_id), str(actor_id))

            siblings = await self.comment_repository.find_by_post(comment.post_id)
            doomed = self._subtree_ids(comment.id, siblings)

            await self.like_service.delete_for_targets(LikeableKind.COMMENT, doomed)
            await self.comment_repository.delete_many(doomed)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                removed=len(doomed),
            )
            return len(doomed)

    async def delete_for_post(self, post_id: PostId) -> int:
        """Delete every comment on a post and the likes on those comments.

        Args:
            post_id: Post ID

        Returns:
            Number of comments removed
        """
        with logfire.span("comment_service.delete_for_post", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            ids = [comment.id for comment in comments]
            await self.like_service.delete_for_targets(LikeableKind.COMMENT, ids)
            await self.comment_repository.delete_many(ids)
            logfire.info("Post comments deleted", post_id=str(post_id), count=len(ids))
            return len(ids)

    async def count_top_level(self, post_id: PostId) -> int:
        """Number of comments on a post that are not replies."""
        return await self.comment_repository.count_top_level(post_id)

    async def tree_for_post(
        self, post_id: PostId, viewer_id: UserId
    ) -> list[CommentNode]:
        """Build the comment tree of a post as seen by a viewer.

        All comments are loaded in one query and linked by ID in memory.
        Comments whose parent is missing, or whose parent chain loops, never
        connect to a top-level comment and are left out.

        Args:
            post_id: Post ID
            viewer_id: User the like state is computed for

        Returns:
            Top-level comment nodes ordered by creation time, each holding
            its replies in the same order
        """
        with logfire.span(
            "comment_service.tree_for_post",
            post_id=str(post_id),
            viewer_id=str(viewer_id),
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            if not comments:
                return []

            comments = sorted(comments, key=lambda c: c.created_at)
            likes = await self.like_service.summarize_many(
                LikeableKind.COMMENT, [c.id for c in comments], viewer_id
            )
            owners = await self.user_service.get_many([c.owner_id for c in comments])

            children: dict[CommentId, list[Comment]] = defaultdict(list)
            for comment in comments:
                if comment.parent_id is not None:
                    children[comment.parent_id].append(comment)

            linked: set[CommentId] = set()

            def build(comment: Comment) -> CommentNode | None:
                if comment.id in linked or comment.owner_id not in owners:
                    return None
                linked.add(comment.id)
                node = CommentNode(
                    comment=comment,
                    owner=owners[comment.owner_id],
                    likes=likes.get(comment.id, LikeSummary()),
                )
                for child in children.get(comment.id, []):
                    child_node = build(child)
                    if child_node:
                        node.replies.append(child_node)
                return node

            roots = []
            for comment in comments:
                if comment.parent_id is None:
                    node = build(comment)
                    if node:
                        roots.append(node)

            dropped = len(comments) - len(linked)
            if dropped:
                logfire.warn(
                    "Unreachable comments left out of tree",
                    post_id=str(post_id),
                    dropped=dropped,
                )
            return roots

    @staticmethod
    def _subtree_ids(root_id: CommentId, comments: list[Comment]) -> list[CommentId]:
        """IDs of a comment and all of its descendants, root first."""
        children: dict[CommentId, list[CommentId]] = defaultdict(list)
        for comment in comments:
            if comment.parent_id is not None:
                children[comment.parent_id].append(comment.id)

        ids: list[CommentId] = []
        seen: set[CommentId] = set()
        stack = [root_id]
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            ids.append(current)
            stack.extend(children.get(current, []))
        return ids
