"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for feed entities.

    Entities are frozen; changes produce a new instance through ``evolve``.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Tagged like targets are value objects
    )

    def evolve(self, **changes: Any) -> Self:
        """Copy with ``changes`` applied, re-running field validation.

        Unlike ``model_copy(update=...)`` this rejects values the entity
        could not have been constructed with (e.g. empty post content).
        """
        return self.model_validate({**self.model_dump(), **changes})
