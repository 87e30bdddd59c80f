"""Media storage backed by the local filesystem.

Files are written below a root directory as ``posts/<post_id>/<ts>_<name>``
and served by the API under the configured media base URL.
"""

import re
import time
from pathlib import Path

import logfire

from feed.adapter.error import MediaStorageError
from feed.domain.service.storage import MediaStorage
from feed.domain.value import PostId

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def storage_key(post_id: PostId, filename: str) -> str:
    """Build the storage reference for an uploaded file.

    Args:
        post_id: Post the file belongs to
        filename: Client-supplied file name (directory parts are stripped)

    Returns:
        Reference of the form ``posts/<post_id>/<timestamp>_<filename>``
    """
    name = _UNSAFE_CHARS.sub("_", Path(filename).name).strip("._") or "upload"
    return f"posts/{post_id}/{int(time.time())}_{name}"


class LocalMediaStorage(MediaStorage):
    """Stores post media on disk."""

    def __init__(self, root: str, base_url: str) -> None:
        """Initialize local storage.

        Args:
            root: Directory files are written below
            base_url: Public URL prefix the directory is served under
        """
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    async def store(self, post_id: PostId, filename: str, content: bytes) -> str:
        ref = storage_key(post_id, filename)
        path = self._resolve(ref)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as e:
            logfire.error("Failed to store media", ref=ref, error=str(e))
            raise MediaStorageError(f"Could not store {filename}") from e

        logfire.info("Media stored", ref=ref, size=len(content))
        return ref

    async def release(self, ref: str) -> None:
        path = self._resolve(ref)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logfire.error("Failed to release media", ref=ref, error=str(e))
            raise MediaStorageError(f"Could not delete {ref}") from e
        logfire.info("Media released", ref=ref)

    def url_for(self, ref: str) -> str:
        return f"{self.base_url}/{ref}"

    def _resolve(self, ref: str) -> Path:
        path = (self.root / ref).resolve()
        if not path.is_relative_to(self.root.resolve()):
            raise MediaStorageError(f"Reference escapes storage root: {ref}")
        return path


class InMemoryMediaStorage(MediaStorage):
    """In-memory media storage for testing."""

    def __init__(self, base_url: str = "http://localhost:8000/storage") -> None:
        self.base_url = base_url.rstrip("/")
        self.files: dict[str, bytes] = {}

    async def store(self, post_id: PostId, filename: str, content: bytes) -> str:
        ref = storage_key(post_id, filename)
        self.files[ref] = content
        return ref

    async def release(self, ref: str) -> None:
        self.files.pop(ref, None)

    def url_for(self, ref: str) -> str:
        return f"{self.base_url}/{ref}"
