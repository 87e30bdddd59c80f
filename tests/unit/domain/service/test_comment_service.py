"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from feed.domain.error import AuthorizationError, NotFoundError, ValidationError
from feed.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from feed.domain.service import CommentService, LikeService
from feed.domain.value import (
    CommentId,
    CommentTarget,
    LikeableKind,
    PostId,
    Visibility,
)
from tests.factories import save_comment, save_post, save_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestAddComment:
    """Tests for add_comment method."""

    @pytest.mark.asyncio
    async def test_add_top_level_comment(self, unit_env):
        """A comment without a parent sits at depth 0."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)

        # Act
        comment = await comment_service.add_comment(post.id, user.id, "First!")

        # Assert
        assert comment.post_id == post.id
        assert comment.owner_id == user.id
        assert comment.parent_id is None
        assert comment.depth == 0
        assert await comment_service.count_top_level(post.id) == 1

    @pytest.mark.asyncio
    async def test_add_reply(self, unit_env):
        """A reply records its parent and depth."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)
        parent = await comment_service.add_comment(post.id, user.id, "Question?")

        # Act
        reply = await comment_service.add_comment(
            post.id, user.id, "Answer.", parent_id=parent.id
        )

        # Assert
        assert reply.parent_id == parent.id
        assert reply.depth == 1
        # Replies don't count as top-level comments
        assert await comment_service.count_top_level(post.id) == 1

    @pytest.mark.asyncio
    async def test_empty_content_raises_validation_error(self, unit_env):
        """Whitespace-only comments are rejected."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)

        # Act & Assert
        with pytest.raises(ValidationError, match="must not be empty"):
            await comment_service.add_comment(post.id, user.id, "   ")

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        """Comments need an existing post."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        user = await save_user(user_repo)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Post not found"):
            await comment_service.add_comment(PostId(uuid4()), user.id, "Hello?")

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        """Replies need an existing parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.add_comment(
                post.id, user.id, "Reply", parent_id=CommentId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_post_raises_validation_error(self, unit_env):
        """A reply's parent must belong to the same post."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)
        other_post = await save_post(post_repo, user.id, minutes=1)
        foreign_parent = await comment_service.add_comment(
            other_post.id, user.id, "Elsewhere"
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="does not belong to this post"):
            await comment_service.add_comment(
                post.id, user.id, "Reply", parent_id=foreign_parent.id
            )
        assert await comment_repo.find_by_post(post.id) == []

    @pytest.mark.asyncio
    async def test_reply_to_reply_exceeds_depth_cap(self, unit_env):
        """With the default cap, replies can't be replied to."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)
        top = await comment_service.add_comment(post.id, user.id, "Top")
        reply = await comment_service.add_comment(
            post.id, user.id, "Reply", parent_id=top.id
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="not allowed"):
            await comment_service.add_comment(
                post.id, user.id, "Too deep", parent_id=reply.id
            )

    @pytest.mark.asyncio
    async def test_deeper_cap_allows_nested_replies(self, unit_env):
        """The cap is configurable; the tree handles any depth."""
        # Arrange
        default_service = await unit_env.get(CommentService)
        comment_service = CommentService(
            comment_repository=default_service.comment_repository,
            post_repository=default_service.post_repository,
            like_service=default_service.like_service,
            user_service=default_service.user_service,
            max_depth=3,
        )
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)
        parent = await comment_service.add_comment(post.id, user.id, "Level 0")
        for level in range(1, 4):
            parent = await comment_service.add_comment(
                post.id, user.id, f"Level {level}", parent_id=parent.id
            )

        # Act
        tree = await comment_service.tree_for_post(post.id, user.id)

        # Assert
        node = tree[0]
        for level in range(1, 4):
            assert node.replies_count == 1
            node = node.replies[0]
            assert node.comment.content == f"Level {level}"
        assert node.replies == []

    @pytest.mark.asyncio
    async def test_comment_on_hidden_post_raises_not_found(self, unit_env):
        """Private posts of other users can't be commented on."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        owner = await save_user(user_repo, "Olive")
        stranger = await save_user(user_repo, "Sam")
        post = await save_post(post_repo, owner.id, visibility=Visibility.PRIVATE)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.add_comment(post.id, stranger.id, "Peek")


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_cascades_to_replies_and_likes(self, unit_env):
        """Deleting a comment removes its replies and every like on them."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        author = await save_user(user_repo, "Alice")
        other = await save_user(user_repo, "Bob")
        post = await save_post(post_repo, author.id)
        top = await comment_service.add_comment(post.id, author.id, "Top")
        reply = await comment_service.add_comment(
            post.id, other.id, "Reply", parent_id=top.id
        )
        survivor = await comment_service.add_comment(post.id, other.id, "Unrelated")
        await like_service.toggle(other.id, CommentTarget(id=top.id))
        await like_service.toggle(author.id, CommentTarget(id=reply.id))
        await like_service.toggle(author.id, CommentTarget(id=survivor.id))

        # Act
        removed = await comment_service.delete_comment(top.id, author.id)

        # Assert
        assert removed == 2
        assert await comment_repo.find_by_id(top.id) is None
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(survivor.id) is not None
        remaining = await like_repo.find_by_targets(
            LikeableKind.COMMENT, [top.id, reply.id, survivor.id]
        )
        assert [like.target.id for like in remaining] == [survivor.id]

    @pytest.mark.asyncio
    async def test_delete_by_non_owner_raises_authorization_error(self, unit_env):
        """Only the author can delete a comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        author = await save_user(user_repo, "Alice")
        other = await save_user(user_repo, "Bob")
        post = await save_post(post_repo, author.id)
        comment = await comment_service.add_comment(post.id, author.id, "Mine")

        # Act & Assert
        with pytest.raises(AuthorizationError):
            await comment_service.delete_comment(comment.id, other.id)
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises_not_found(self, unit_env):
        """Deleting an unknown comment fails."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(uuid4()), uuid4())


class TestTreeForPost:
    """Tests for tree_for_post method."""

    @pytest.mark.asyncio
    async def test_replies_nest_under_their_parent(self, unit_env):
        """Replies appear under their parent, not at the top level."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        like_service = await unit_env.get(LikeService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        alice = await save_user(user_repo, "Alice")
        bob = await save_user(user_repo, "Bob")
        post = await save_post(post_repo, alice.id)
        c1 = await comment_service.add_comment(post.id, alice.id, "c1")
        c2 = await comment_service.add_comment(post.id, bob.id, "c2", parent_id=c1.id)
        await like_service.toggle(alice.id, CommentTarget(id=c2.id))

        # Act
        tree = await comment_service.tree_for_post(post.id, alice.id)

        # Assert
        assert [node.comment.id for node in tree] == [c1.id]
        assert tree[0].replies_count == 1
        reply = tree[0].replies[0]
        assert reply.comment.id == c2.id
        assert reply.owner.id == bob.id
        assert reply.likes.count == 1
        assert reply.likes.is_liked is True
        assert [liker.user_id for liker in reply.likes.likers] == [alice.id]
        assert reply.replies_count == 0

    @pytest.mark.asyncio
    async def test_ordered_oldest_first_at_every_level(self, unit_env):
        """Top-level comments and replies are both ascending by creation."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)
        later = await save_comment(comment_repo, post.id, user.id, "later", minutes=10)
        earlier = await save_comment(comment_repo, post.id, user.id, "earlier", minutes=1)
        late_reply = await save_comment(
            comment_repo, post.id, user.id, "late reply", parent=earlier, minutes=9
        )
        early_reply = await save_comment(
            comment_repo, post.id, user.id, "early reply", parent=earlier, minutes=2
        )

        # Act
        tree = await comment_service.tree_for_post(post.id, user.id)

        # Assert
        assert [node.comment.id for node in tree] == [earlier.id, later.id]
        assert [node.comment.id for node in tree[0].replies] == [
            early_reply.id,
            late_reply.id,
        ]

    @pytest.mark.asyncio
    async def test_orphaned_and_cyclic_comments_are_dropped(self, unit_env):
        """Comments that never reach a top-level comment are left out."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)
        root = await save_comment(comment_repo, post.id, user.id, "root")
        await save_comment(
            comment_repo, post.id, user.id, "orphan", parent_id=CommentId(uuid4())
        )
        loop_a, loop_b = CommentId(uuid4()), CommentId(uuid4())
        await save_comment(
            comment_repo, post.id, user.id, "a", comment_id=loop_a, parent_id=loop_b
        )
        await save_comment(
            comment_repo, post.id, user.id, "b", comment_id=loop_b, parent_id=loop_a
        )

        # Act
        tree = await comment_service.tree_for_post(post.id, user.id)

        # Assert
        assert [node.comment.id for node in tree] == [root.id]
        assert tree[0].replies == []

    @pytest.mark.asyncio
    async def test_post_without_comments(self, unit_env):
        """No comments gives an empty tree."""
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.tree_for_post(PostId(uuid4()), uuid4()) == []
