"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """A single user action: one request model in, one response model out.

    IDs travel as strings in requests and responses; use cases convert them
    to typed domain IDs before calling services.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """Run the action."""
