"""Media storage interface."""

from abc import ABC, abstractmethod

from feed.domain.value import PostId


class MediaStorage(ABC):
    """Storage collaborator for post media.

    The domain keeps only the opaque reference returned by ``store``; the
    bytes live wherever the implementation puts them.
    """

    @abstractmethod
    async def store(self, post_id: PostId, filename: str, content: bytes) -> str:
        """Persist uploaded media for a post.

        Args:
            post_id: Post the media belongs to
            filename: Client-supplied file name
            content: Raw file bytes

        Returns:
            Opaque reference to the stored file

        Raises:
            MediaStorageError: If the file can't be written
        """
        pass

    @abstractmethod
    async def release(self, ref: str) -> None:
        """Delete stored media. Unknown references are ignored.

        Args:
            ref: Reference previously returned by ``store``

        Raises:
            MediaStorageError: If the file can't be removed
        """
        pass

    @abstractmethod
    def url_for(self, ref: str) -> str:
        """Public URL for a stored reference.

        Args:
            ref: Reference previously returned by ``store``

        Returns:
            Absolute URL clients can fetch the media from
        """
        pass
