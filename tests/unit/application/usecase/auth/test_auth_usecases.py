"""Unit tests for the authentication use cases."""

import pydantic
import pytest

from feed.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from feed.domain.error import ConflictError, ValidationError
from feed.util.jwt import JWTError
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def _register_request(email: str = "grace@feed.io") -> RegisterRequest:
    return RegisterRequest(
        first_name="Grace",
        last_name="Hopper",
        email=email,
        password="cobol-1959",
        password_confirmation="cobol-1959",
    )


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_user_and_token(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)

        # Act
        response = await use_case.execute(_register_request())

        # Assert
        assert response.user.email == "grace@feed.io"
        assert response.user.first_name == "Grace"
        assert response.token

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises_conflict(self, unit_env):
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        await use_case.execute(_register_request())

        # Act & Assert
        with pytest.raises(ConflictError):
            await use_case.execute(_register_request("GRACE@feed.io"))

    def test_password_confirmation_must_match(self):
        with pytest.raises(pydantic.ValidationError, match="confirmation does not match"):
            RegisterRequest(
                first_name="Grace",
                last_name="Hopper",
                email="grace@feed.io",
                password="cobol-1959",
                password_confirmation="fortran-1957",
            )

    def test_invalid_email_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            _register_request("not-an-email")


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_token_resolves_to_user(self, unit_env):
        """A login token identifies the same user through /auth/me."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        current_user = await unit_env.get(GetCurrentUserUseCase)
        registered = await register.execute(_register_request())

        # Act
        response = await login.execute(
            LoginRequest(email="grace@feed.io", password="cobol-1959")
        )
        me = await current_user.execute(GetCurrentUserRequest(token=response.token))

        # Assert
        assert response.message == "Login successful"
        assert response.user.id == registered.user.id
        assert me.id == registered.user.id

    @pytest.mark.asyncio
    async def test_wrong_password_raises_validation_error(self, unit_env):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        await register.execute(_register_request())

        # Act & Assert
        with pytest.raises(ValidationError, match="credentials are incorrect"):
            await login.execute(LoginRequest(email="grace@feed.io", password="nope"))

    @pytest.mark.asyncio
    async def test_garbage_token_raises_jwt_error(self, unit_env):
        current_user = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await current_user.execute(GetCurrentUserRequest(token="garbage"))
