"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests swap for in-memory versions
Component = Literal["media", "persistence"]


class ProviderBase(Provider):
    """Common base for feed providers.

    A provider that declares ``__mock_component__`` is a swappable component;
    its subclasses are the production (``__is_mock__ = False``) and test
    (``__is_mock__ = True``) implementations picked by ``get_provider``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
