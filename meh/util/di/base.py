"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests may swap for in-memory doubles
Component = Literal["notifier", "persistence"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to pick prod or mock implementations.

    A mockable component is declared as a base class setting
    __mock_component__, with one production and one mock subclass that set
    __is_mock__ accordingly.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
