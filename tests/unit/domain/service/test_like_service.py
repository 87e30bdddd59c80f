"""Unit tests for LikeService."""

from uuid import uuid4

import pytest

from feed.domain.error import NotFoundError, ValidationError
from feed.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from feed.domain.service import LikeService
from feed.domain.value import (
    CommentId,
    CommentTarget,
    LikeableKind,
    PostId,
    PostTarget,
    UserId,
    Visibility,
    make_like_target,
)
from tests.factories import save_comment, save_post, save_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestToggle:
    """Tests for toggle method."""

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_original_state(self, unit_env):
        """Liking then unliking leaves no like behind."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        owner = await save_user(user_repo, "Olive")
        liker = await save_user(user_repo, "Lena")
        post = await save_post(post_repo, owner.id)
        target = PostTarget(id=post.id)

        # Act
        first = await like_service.toggle(liker.id, target)
        count_after_first = await like_service.count(target)
        second = await like_service.toggle(liker.id, target)

        # Assert
        assert first is True
        assert count_after_first == 1
        assert second is False
        assert await like_service.count(target) == 0
        assert await like_service.is_liked_by(liker.id, target) is False

    @pytest.mark.asyncio
    async def test_toggle_on_comment(self, unit_env):
        """Comments are liked through the same operation as posts."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)
        comment = await save_comment(comment_repo, post.id, user.id)
        target = CommentTarget(id=comment.id)

        # Act
        liked = await like_service.toggle(user.id, target)

        # Assert
        assert liked is True
        assert await like_service.is_liked_by(user.id, target) is True
        # The post itself is untouched
        assert await like_service.count(PostTarget(id=post.id)) == 0

    @pytest.mark.asyncio
    async def test_toggle_never_stores_duplicate_rows(self, unit_env):
        """At most one like exists per user and target."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)
        target = PostTarget(id=post.id)

        # Act
        for _ in range(5):
            await like_service.toggle(user.id, target)

        # Assert - odd number of toggles leaves exactly one like
        likes = await like_repo.find_by_target(target)
        assert len(likes) == 1
        assert likes[0].owner_id == user.id

    @pytest.mark.asyncio
    async def test_toggle_nonexistent_post_raises_not_found(self, unit_env):
        """Likes can't point at posts that don't exist."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        user_id = UserId(uuid4())
        target = PostTarget(id=PostId(uuid4()))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await like_service.toggle(user_id, target)
        assert await like_repo.count_by_target(target) == 0

    @pytest.mark.asyncio
    async def test_toggle_nonexistent_comment_raises_not_found(self, unit_env):
        """Likes can't point at comments that don't exist."""
        # Arrange
        like_service = await unit_env.get(LikeService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Comment not found"):
            await like_service.toggle(
                UserId(uuid4()), CommentTarget(id=CommentId(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_toggle_on_someone_elses_private_post_raises_not_found(
        self, unit_env
    ):
        """Private posts of other users can't be liked."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        owner = await save_user(user_repo, "Olive")
        stranger = await save_user(user_repo, "Sam")
        post = await save_post(post_repo, owner.id, visibility=Visibility.PRIVATE)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await like_service.toggle(stranger.id, PostTarget(id=post.id))

    def test_unknown_kind_raises_validation_error(self):
        """Only posts and comments are likeable."""
        with pytest.raises(ValidationError, match="Unsupported like target kind"):
            make_like_target("photo", uuid4())


class TestSummaries:
    """Tests for likers and summary methods."""

    @pytest.mark.asyncio
    async def test_likers_in_insertion_order(self, unit_env):
        """Likers are listed in the order they liked."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        owner = await save_user(user_repo, "Olive")
        first = await save_user(user_repo, "Frank", "First")
        second = await save_user(user_repo, "Sonia", "Second")
        post = await save_post(post_repo, owner.id)
        target = PostTarget(id=post.id)

        await like_service.toggle(first.id, target)
        await like_service.toggle(second.id, target)

        # Act
        likers = await like_service.likers(target)

        # Assert
        assert [liker.user_id for liker in likers] == [first.id, second.id]
        assert [liker.name for liker in likers] == ["Frank First", "Sonia Second"]

    @pytest.mark.asyncio
    async def test_summarize_reflects_viewer(self, unit_env):
        """is_liked is computed for the viewer, count for everyone."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        owner = await save_user(user_repo, "Olive")
        liker = await save_user(user_repo, "Lena")
        post = await save_post(post_repo, owner.id)
        target = PostTarget(id=post.id)
        await like_service.toggle(liker.id, target)

        # Act
        as_liker = await like_service.summarize(target, liker.id)
        as_owner = await like_service.summarize(target, owner.id)

        # Assert
        assert as_liker.count == as_owner.count == 1
        assert as_liker.is_liked is True
        assert as_owner.is_liked is False

    @pytest.mark.asyncio
    async def test_summarize_many_covers_every_requested_target(self, unit_env):
        """Targets without likes get an empty summary."""
        # Arrange
        like_service = await unit_env.get(LikeService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)

        user = await save_user(user_repo)
        post = await save_post(post_repo, user.id)
        liked = await save_comment(comment_repo, post.id, user.id, minutes=1)
        quiet = await save_comment(comment_repo, post.id, user.id, minutes=2)
        await like_service.toggle(user.id, CommentTarget(id=liked.id))
        # Likes on the post itself stay out of comment summaries
        await like_service.toggle(user.id, PostTarget(id=post.id))

        # Act
        summaries = await like_service.summarize_many(
            LikeableKind.COMMENT, [liked.id, quiet.id], user.id
        )

        # Assert
        assert summaries[liked.id].count == 1
        assert summaries[liked.id].is_liked is True
        assert summaries[quiet.id].count == 0
        assert summaries[quiet.id].likers == []

    @pytest.mark.asyncio
    async def test_summarize_many_with_no_ids(self, unit_env):
        """Empty input needs no lookup."""
        like_service = await unit_env.get(LikeService)

        assert await like_service.summarize_many(
            LikeableKind.POST, [], UserId(uuid4())
        ) == {}
