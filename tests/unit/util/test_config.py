"""Unit tests for settings."""

import pytest

from feed.config import AuthSettings, Settings, check_production_settings
from feed.util.error import ConfigurationError


def test_media_base_url_follows_api_host():
    settings = Settings(environment="development", host="localhost", port=8000)

    assert settings.api.base_url == "http://localhost:8000"
    assert settings.media.base_url == "http://localhost:8000/storage"


def test_production_uses_https():
    settings = Settings(
        environment="production",
        host="api.feed.io",
        frontend_host="feed.io",
        auth=AuthSettings(jwt_secret="s3cret"),
    )

    assert settings.api.base_url == "https://api.feed.io"
    assert settings.api.frontend_url == "https://feed.io"
    check_production_settings(settings)


def test_production_requires_jwt_secret():
    settings = Settings(environment="production", host="api.feed.io")

    with pytest.raises(ConfigurationError, match="JWT_SECRET"):
        check_production_settings(settings)
