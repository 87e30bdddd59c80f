"""Post view assembly.

Every path that returns a post (create, get, list, update, comment creation)
goes through ``PostAssembler.assemble`` so the shape can't drift between them.
"""

from datetime import datetime

import logfire
from pydantic import BaseModel

from feed.domain.model import Post, User
from feed.domain.service import (
    CommentNode,
    CommentService,
    LikeService,
    LikeSummary,
    MediaStorage,
    UserService,
)
from feed.domain.value import PostTarget, UserId, Visibility


class LikerView(BaseModel):
    """Someone who liked a post or comment."""

    id: str
    name: str


class PostOwnerView(BaseModel):
    """Post owner summary."""

    id: str
    first_name: str
    last_name: str
    email: str


class CommentOwnerView(BaseModel):
    """Comment owner summary."""

    id: str
    first_name: str
    last_name: str


class CommentView(BaseModel):
    """A comment with its derived like state and nested replies."""

    id: str
    post_id: str
    parent_id: str | None
    content: str
    created_at: datetime
    owner: CommentOwnerView
    likes_count: int
    is_liked: bool
    likers: list[LikerView]
    replies_count: int
    replies: list["CommentView"]


class PostView(BaseModel):
    """A post with owner, like state and the full comment tree."""

    id: str
    content: str
    image_url: str | None
    video_url: str | None
    visibility: Visibility
    created_at: datetime
    updated_at: datetime
    owner: PostOwnerView
    likes_count: int
    comments_count: int
    is_liked: bool
    likers: list[LikerView]
    comments: list[CommentView]


def _likers(summary: LikeSummary) -> list[LikerView]:
    return [LikerView(id=str(liker.user_id), name=liker.name) for liker in summary.likers]


def comment_view(node: CommentNode) -> CommentView:
    """Shape a comment tree node (and its replies) for output."""
    comment = node.comment
    return CommentView(
        id=str(comment.id),
        post_id=str(comment.post_id),
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        content=comment.content,
        created_at=comment.created_at,
        owner=CommentOwnerView(
            id=str(node.owner.id),
            first_name=node.owner.first_name,
            last_name=node.owner.last_name,
        ),
        likes_count=node.likes.count,
        is_liked=node.likes.is_liked,
        likers=_likers(node.likes),
        replies_count=node.replies_count,
        replies=[comment_view(reply) for reply in node.replies],
    )


class PostAssembler:
    """Builds the PostView of a post as seen by one viewer."""

    def __init__(
        self,
        user_service: UserService,
        like_service: LikeService,
        comment_service: CommentService,
        media_storage: MediaStorage,
    ) -> None:
        """Initialize post assembler.

        Args:
            user_service: User domain service (post owner)
            like_service: Like domain service (post like summary)
            comment_service: Comment domain service (comment tree)
            media_storage: Media storage (public media URLs)
        """
        self.user_service = user_service
        self.like_service = like_service
        self.comment_service = comment_service
        self.media_storage = media_storage

    async def assemble(
        self, post: Post, viewer_id: UserId, owner: User | None = None
    ) -> PostView:
        """Build the full view of a post.

        Args:
            post: Post to shape
            viewer_id: User the like state is computed for
            owner: Post owner, if already loaded

        Returns:
            Post view with owner, likes, counts and comment tree
        """
        with logfire.span(
            "post_assembler.assemble", post_id=str(post.id), viewer_id=str(viewer_id)
        ):
            if owner is None:
                owner = await self.user_service.get_by_id(post.owner_id)

            likes = await self.like_service.summarize(PostTarget(id=post.id), viewer_id)
            tree = await self.comment_service.tree_for_post(post.id, viewer_id)
            comments_count = await self.comment_service.count_top_level(post.id)

            return PostView(
                id=str(post.id),
                content=post.content,
                image_url=self._url(post.image_ref),
                video_url=self._url(post.video_ref),
                visibility=post.visibility,
                created_at=post.created_at,
                updated_at=post.updated_at,
                owner=PostOwnerView(
                    id=str(owner.id),
                    first_name=owner.first_name,
                    last_name=owner.last_name,
                    email=owner.email,
                ),
                likes_count=likes.count,
                comments_count=comments_count,
                is_liked=likes.is_liked,
                likers=_likers(likes),
                comments=[comment_view(node) for node in tree],
            )

    async def assemble_many(self, posts: list[Post], viewer_id: UserId) -> list[PostView]:
        """Build views for several posts, loading their owners in one batch."""
        owners = await self.user_service.get_many([post.owner_id for post in posts])
        return [
            await self.assemble(post, viewer_id, owner=owners.get(post.owner_id))
            for post in posts
        ]

    def _url(self, ref: str | None) -> str | None:
        return self.media_storage.url_for(ref) if ref else None
