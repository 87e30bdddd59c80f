"""User domain service."""

from datetime import datetime, timezone
from typing import Sequence
from uuid import uuid4

import logfire

from feed.domain.error import ConflictError, NotFoundError, ValidationError
from feed.domain.model import User
from feed.domain.repository import UserRepository
from feed.domain.value import UserId
from feed.util.password import hash_password, verify_password

from .base import Service

INVALID_CREDENTIALS = "The provided credentials are incorrect."


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def register(
        self, first_name: str, last_name: str, email: str, password: str
    ) -> User:
        """Register a new user.

        Args:
            first_name: Given name
            last_name: Family name
            email: Email address (stored lower-cased)
            password: Plaintext password, hashed before storage

        Returns:
            The created user

        Raises:
            ConflictError: If the email is already registered
        """
        email = email.strip().lower()
        with logfire.span("user_service.register", email=email):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.warn("Registration with taken email", email=email)
                raise ConflictError("The email has already been taken.")

            now = datetime.now(timezone.utc)
            user = User(
                id=UserId(uuid4()),
                first_name=first_name.strip(),
                last_name=last_name.strip(),
                email=email,
                password_hash=hash_password(password),
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), email=email)
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials and return the matching user.

        Args:
            email: Email address
            password: Plaintext password

        Returns:
            The authenticated user

        Raises:
            ValidationError: If the email is unknown or the password is wrong
        """
        email = email.strip().lower()
        with logfire.span("user_service.authenticate", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Failed login attempt", email=email)
                raise ValidationError(INVALID_CREDENTIALS)

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_many(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Batch-load users by ID.

        Args:
            user_ids: IDs to load (duplicates allowed)

        Returns:
            Mapping of ID to user; unknown IDs are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}
