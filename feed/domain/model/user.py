"""User aggregate root.

Users register with an email and password and own every post, comment
and like they create.
"""

from datetime import datetime, timezone

from pydantic import Field

from feed.domain.model.common import DomainModel
from feed.domain.value import UserId


class User(DomainModel):
    """User aggregate root.

    Immutable after registration except for the password hash.
    """

    id: UserId
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)  # Unique across users
    password_hash: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def display_name(self) -> str:
        """Full name shown in "liked by" lists."""
        return f"{self.first_name} {self.last_name}"
