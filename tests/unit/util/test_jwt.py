"""Unit tests for JWT utilities."""

from uuid import uuid4

import pytest

from feed.config import AuthSettings
from feed.domain.service import JWTService
from feed.util.jwt import JWTError, create_token, verify_token


class TestTokens:
    def test_round_trip_payload(self):
        settings = AuthSettings(jwt_secret="test-secret")
        user_id = str(uuid4())

        payload = verify_token(create_token(user_id, "ada@feed.io", settings), settings)

        assert payload.user_id == user_id
        assert payload.email == "ada@feed.io"

    def test_wrong_secret_rejected(self):
        token = create_token(str(uuid4()), "ada@feed.io", AuthSettings(jwt_secret="a"))

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret="b"))

    def test_expired_token_rejected(self):
        settings = AuthSettings(jwt_secret="test-secret", jwt_expiry_days=-1)
        token = create_token(str(uuid4()), "ada@feed.io", settings)

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, settings)


class TestJWTService:
    def test_get_user_id_from_token_swallows_bad_tokens(self):
        service = JWTService(AuthSettings(jwt_secret="test-secret"))
        user_id = str(uuid4())

        token = service.create_token(user_id, "a@feed.io")

        assert service.get_user_id_from_token(token) == user_id
        assert service.get_user_id_from_token("garbage") is None
        assert service.get_user_id_from_token(None) is None
