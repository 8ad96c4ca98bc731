"""Infrastructure providers (mockable components)."""

from meh.util.di.infrastructure.notifier import NotifierProvider, ProdNotifierProvider
from meh.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "NotifierProvider",
    "PersistenceProvider",
    "ProdNotifierProvider",
    "ProdPersistenceProvider",
]
