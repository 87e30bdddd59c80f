"""Media storage infrastructure providers."""

from dishka import Scope, provide

from feed.adapter.storage import LocalMediaStorage
from feed.config import MediaSettings
from feed.domain.service import MediaStorage
from feed.util.di.base import ProviderBase


class MediaProvider(ProviderBase):
    """Media storage component base."""

    __mock_component__ = "media"


class ProdMediaProvider(MediaProvider):
    """Production media provider writing to the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_media_storage(self, media_settings: MediaSettings) -> MediaStorage:
        """Provide local filesystem media storage."""
        return LocalMediaStorage(
            root=media_settings.root,
            base_url=media_settings.base_url or "/storage",
        )
