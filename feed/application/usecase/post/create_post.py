"""Create post use case."""

from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from feed.config import MediaSettings
from feed.domain.error import ValidationError
from feed.domain.service import MediaStorage, PostService
from feed.domain.value import PostId, UserId, Visibility

from .assemble import PostAssembler, PostView


class MediaUpload(BaseModel):
    """An uploaded file as received from the client."""

    filename: str
    content_type: str
    content: bytes


class CreatePostRequest(BaseModel):
    """Create post request."""

    owner_id: str  # User ID from authenticated user
    content: str
    visibility: Visibility = Visibility.PUBLIC
    image: MediaUpload | None = None
    video: MediaUpload | None = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    message: str = "Post created successfully"
    post: PostView


class CreatePostUseCase:
    """Use case for creating a post with optional image and video."""

    def __init__(
        self,
        post_service: PostService,
        media_storage: MediaStorage,
        media_settings: MediaSettings,
        assembler: PostAssembler,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            media_storage: Storage for uploaded media
            media_settings: Upload limits and accepted types
            assembler: Post view assembler
        """
        self.post_service = post_service
        self.media_storage = media_storage
        self.media_settings = media_settings
        self.assembler = assembler

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Validate media type and size
        2. Store media under the new post's ID
        3. Create the post (stored media is released if this fails)
        4. Assemble the post view

        Args:
            request: Create post request

        Returns:
            Created post as seen by its owner

        Raises:
            ValidationError: If content is empty or media is invalid
        """
        if request.image:
            self._validate_image(request.image)
        if request.video:
            self._validate_video(request.video)

        owner_id = UserId(UUID(request.owner_id))
        post_id = PostId(uuid4())

        stored: list[str] = []
        try:
            image_ref = await self._store(post_id, request.image, stored)
            video_ref = await self._store(post_id, request.video, stored)
            post = await self.post_service.create_post(
                post_id=post_id,
                owner_id=owner_id,
                content=request.content,
                visibility=request.visibility,
                image_ref=image_ref,
                video_ref=video_ref,
            )
        except Exception:
            await self.post_service.release_media(stored)
            raise

        return CreatePostResponse(post=await self.assembler.assemble(post, owner_id))

    async def _store(
        self, post_id: PostId, upload: MediaUpload | None, stored: list[str]
    ) -> str | None:
        if upload is None:
            return None
        ref = await self.media_storage.store(post_id, upload.filename, upload.content)
        stored.append(ref)
        return ref

    def _validate_image(self, upload: MediaUpload) -> None:
        if not upload.content_type.startswith("image/"):
            raise ValidationError("The image must be an image file.")
        if len(upload.content) > self.media_settings.max_image_bytes:
            logfire.warn("Image too large", size=len(upload.content))
            raise ValidationError(
                f"The image may not be greater than "
                f"{self.media_settings.max_image_bytes // 1024} kilobytes."
            )

    def _validate_video(self, upload: MediaUpload) -> None:
        if upload.content_type not in self.media_settings.video_types:
            raise ValidationError(
                "The video must be a file of type: "
                + ", ".join(t.split("/")[1] for t in self.media_settings.video_types)
                + "."
            )
        if len(upload.content) > self.media_settings.max_video_bytes:
            logfire.warn("Video too large", size=len(upload.content))
            raise ValidationError(
                f"The video may not be greater than "
                f"{self.media_settings.max_video_bytes // 1024} kilobytes."
            )
