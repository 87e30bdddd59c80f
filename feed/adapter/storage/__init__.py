"""Post media storage implementations."""

from .local import InMemoryMediaStorage, LocalMediaStorage, storage_key

__all__ = ["InMemoryMediaStorage", "LocalMediaStorage", "storage_key"]
