"""Post domain service."""

from datetime import datetime, timezone

import logfire

from feed.adapter.error import MediaStorageError
from feed.domain.error import AuthorizationError, NotFoundError, ValidationError
from feed.domain.model.post import Post
from feed.domain.repository import PostRepository
from feed.domain.value import LikeableKind, PostId, UserId, Visibility

from .base import Service
from .comment_service import CommentService
from .like_service import LikeService
from .storage import MediaStorage


class PostService(Service):
    """Domain service for post operations.

    Owns the visibility rule (public, or private and owned by the viewer)
    and the owner-only update/delete policy, including the delete cascade.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        comment_service: CommentService,
        like_service: LikeService,
        media_storage: MediaStorage,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_service: Comment domain service
            like_service: Like domain service
            media_storage: Storage holding post media
        """
        self.post_repository = post_repository
        self.comment_service = comment_service
        self.like_service = like_service
        self.media_storage = media_storage

    async def create_post(
        self,
        post_id: PostId,
        owner_id: UserId,
        content: str,
        visibility: Visibility = Visibility.PUBLIC,
        image_ref: str | None = None,
        video_ref: str | None = None,
    ) -> Post:
        """Create a post.

        The ID is chosen by the caller so media can be stored under it first.

        Args:
            post_id: ID for the new post
            owner_id: Owning user ID
            content: Post text
            visibility: Public or private
            image_ref: Stored image reference
            video_ref: Stored video reference

        Returns:
            Created post

        Raises:
            ValidationError: If content is empty
        """
        with logfire.span(
            "post_service.create_post",
            post_id=str(post_id),
            owner_id=str(owner_id),
            visibility=visibility.value,
        ):
            if not content or not content.strip():
                raise ValidationError("Post content must not be empty")

            now = datetime.now(timezone.utc)
            post = Post(
                id=post_id,
                owner_id=owner_id,
                content=content,
                image_ref=image_ref,
                video_ref=video_ref,
                visibility=visibility,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info(
                "Post created",
                post_id=str(saved.id),
                has_image=image_ref is not None,
                has_video=video_ref is not None,
            )
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID regardless of visibility.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def get_visible_post(self, post_id: PostId, viewer_id: UserId) -> Post:
        """Get a post the viewer is allowed to see.

        Private posts of other users are reported as missing.

        Args:
            post_id: Post ID
            viewer_id: Viewing user ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post doesn't exist or is hidden from the viewer
        """
        post = await self.get_post(post_id)
        if not post.is_visible_to(viewer_id):
            logfire.warn(
                "Private post requested by non-owner",
                post_id=str(post_id),
                viewer_id=str(viewer_id),
            )
            raise NotFoundError("Post", str(post_id))
        return post

    async def visible_posts(self, viewer_id: UserId) -> list[Post]:
        """Public posts plus the viewer's own private posts, newest first."""
        with logfire.span("post_service.visible_posts", viewer_id=str(viewer_id)):
            posts = await self.post_repository.find_visible_to(viewer_id)
            logfire.info(
                "Visible posts retrieved", viewer_id=str(viewer_id), count=len(posts)
            )
            return posts

    async def update_post(
        self,
        post_id: PostId,
        actor_id: UserId,
        content: str | None = None,
        visibility: Visibility | None = None,
    ) -> Post:
        """Change a post's content and/or visibility.

        Only the fields given are changed.

        Args:
            post_id: Post ID
            actor_id: User requesting the change
            content: New text, if changing
            visibility: New visibility, if changing

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post doesn't exist or is hidden from the actor
            AuthorizationError: If the actor doesn't own the post
            ValidationError: If the new content is empty
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            actor_id=str(actor_id),
        ):
            post = await self._get_owned(post_id, actor_id)

            changes: dict = {}
            if content is not None:
                if not content.strip():
                    raise ValidationError("Post content must not be empty")
                changes["content"] = content
            if visibility is not None:
                changes["visibility"] = visibility

            if not changes:
                return post

            changes["updated_at"] = datetime.now(timezone.utc)
            updated = await self.post_repository.save(post.evolve(**changes))
            logfire.info(
                "Post updated",
                post_id=str(post_id),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return updated

    async def delete_post(self, post_id: PostId, actor_id: UserId) -> None:
        """Delete a post with its comments, all related likes and its media.

        Args:
            post_id: Post ID
            actor_id: User requesting the deletion

        Raises:
            NotFoundError: If the post doesn't exist or is hidden from the actor
            AuthorizationError: If the actor doesn't own the post
        """
        with logfire.span(
            "post_service.delete_post",
            post_id=str(post_id),
            actor_id=str(actor_id),
        ):
            post = await self._get_owned(post_id, actor_id)

            await self.like_service.delete_for_targets(LikeableKind.POST, [post.id])
            await self.comment_service.delete_for_post(post.id)
            await self.post_repository.delete(post.id)
            released = await self.release_media(post.media_refs)

            logfire.info("Post deleted", post_id=str(post_id), media_released=released)

    async def release_media(self, refs: list[str]) -> int:
        """Release stored media, logging refs that can't be removed.

        Storage failures never abort the caller: a file left behind is
        harmless, a post pointing at a deleted file is not.

        Args:
            refs: References previously returned by the media storage

        Returns:
            Number of refs released
        """
        released = 0
        for ref in refs:
            try:
                await self.media_storage.release(ref)
            except MediaStorageError as e:
                logfire.error("Media left behind", ref=ref, error=str(e))
                continue
            released += 1
        return released

    async def _get_owned(self, post_id: PostId, actor_id: UserId) -> Post:
        post = await self.get_visible_post(post_id, actor_id)
        if post.owner_id != actor_id:
            logfire.warn(
                "Unauthorized post modification",
                post_id=str(post_id),
                owner_id=str(post.owner_id),
                actor_id=str(actor_id),
            )
            raise AuthorizationError("post", str(post_id), str(actor_id))
        return post
