"""Dependency injection wiring.

``PROVIDERS`` lists one entry per component. A component that has
subclasses is mockable: its production and mock implementations are
subclasses told apart by ``__is_mock__``. Everything else is used as is.
"""

from typing import Type

from numtalk.util.di.application import ProdApplicationProvider
from numtalk.util.di.base import Component, ProviderBase
from numtalk.util.di.core import ProdConfigProvider
from numtalk.util.di.domain import ProdDomainProvider
from numtalk.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from numtalk.util.error import ConfigurationError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,  # mockable
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """Whether ``base`` is a component with swappable implementations."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        ConfigurationError: If the component has no implementation of that kind
    """
    if not is_mockable(base):
        return base

    for implementation in base.__subclasses__():
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise ConfigurationError(f"{component} has no {kind} provider")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "is_mockable",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
