"""Unit tests for CreatePostUseCase."""

import pytest

from feed.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    MediaUpload,
)
from feed.domain.error import ValidationError
from feed.domain.repository import PostRepository, UserRepository
from feed.domain.service import MediaStorage
from feed.domain.value import Visibility
from tests.factories import save_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

PNG = MediaUpload(filename="cat.png", content_type="image/png", content=b"\x89PNG")
MP4 = MediaUpload(filename="clip.mp4", content_type="video/mp4", content=b"\x00" * 64)


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_text_post(self, unit_env):
        """A plain text post comes back fully assembled."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await save_user(user_repo)

        # Act
        response = await use_case.execute(
            CreatePostRequest(owner_id=str(user.id), content="Hello, feed")
        )

        # Assert
        post = response.post
        assert response.message == "Post created successfully"
        assert post.content == "Hello, feed"
        assert post.visibility == Visibility.PUBLIC
        assert post.owner.id == str(user.id)
        assert post.likes_count == 0
        assert post.comments_count == 0
        assert post.is_liked is False

    @pytest.mark.asyncio
    async def test_create_post_with_media_stores_files(self, unit_env):
        """Uploaded media is stored under the post and exposed as URLs."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        media_storage = await unit_env.get(MediaStorage)
        user_repo = await unit_env.get(UserRepository)
        user = await save_user(user_repo)

        # Act
        response = await use_case.execute(
            CreatePostRequest(
                owner_id=str(user.id),
                content="Look at this",
                visibility=Visibility.PRIVATE,
                image=PNG,
                video=MP4,
            )
        )

        # Assert
        post = response.post
        assert post.visibility == Visibility.PRIVATE
        assert post.image_url.startswith(f"{media_storage.base_url}/posts/{post.id}/")
        assert post.image_url.endswith("_cat.png")
        assert post.video_url.endswith("_clip.mp4")
        assert len(media_storage.files) == 2

    @pytest.mark.asyncio
    async def test_non_image_upload_rejected(self, unit_env):
        """The image slot only takes images."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        user = await save_user(user_repo)
        text_file = MediaUpload(
            filename="notes.txt", content_type="text/plain", content=b"hi"
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="must be an image"):
            await use_case.execute(
                CreatePostRequest(owner_id=str(user.id), content="x", image=text_file)
            )
        assert await post_repo.find_visible_to(user.id) == []

    @pytest.mark.asyncio
    async def test_oversized_image_rejected(self, unit_env):
        """Images are capped at 5 MB by default."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await save_user(user_repo)
        huge = MediaUpload(
            filename="huge.png",
            content_type="image/png",
            content=b"\x00" * (5 * 1024 * 1024 + 1),
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="5120 kilobytes"):
            await use_case.execute(
                CreatePostRequest(owner_id=str(user.id), content="x", image=huge)
            )

    @pytest.mark.asyncio
    async def test_unsupported_video_type_rejected(self, unit_env):
        """Only the configured video types are accepted."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await save_user(user_repo)
        webm = MediaUpload(filename="clip.webm", content_type="video/webm", content=b"")

        # Act & Assert
        with pytest.raises(ValidationError, match="mp4, avi, mpeg, quicktime"):
            await use_case.execute(
                CreatePostRequest(owner_id=str(user.id), content="x", video=webm)
            )

    @pytest.mark.asyncio
    async def test_stored_media_released_when_post_rejected(self, unit_env):
        """A failed create leaves no orphaned files."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        media_storage = await unit_env.get(MediaStorage)
        user_repo = await unit_env.get(UserRepository)
        user = await save_user(user_repo)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreatePostRequest(owner_id=str(user.id), content="   ", image=PNG)
            )
        assert media_storage.files == {}
