"""Dependency injection wiring.

Every entry of PROVIDERS is either a concrete provider or the base class of
a mockable component whose production and mock implementations are its
subclasses.
"""

from typing import Type

from meh.util.di.adapter import ProdAdapterProvider
from meh.util.di.application import ProdApplicationProvider
from meh.util.di.base import Component, ProviderBase
from meh.util.di.core import ProdConfigProvider
from meh.util.di.domain import ProdDomainProvider
from meh.util.di.infrastructure import (
    NotifierProvider,
    PersistenceProvider,
    ProdNotifierProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdAdapterProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    PersistenceProvider,
    NotifierProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve an entry of PROVIDERS to the provider class to instantiate.

    Raises:
        ValueError: If a mockable component lacks the requested implementation
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "NotifierProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdAdapterProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdNotifierProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
