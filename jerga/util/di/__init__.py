"""Dependency injection module."""

from typing import Type

from jerga.util.di.application import ProdApplicationProvider
from jerga.util.di.base import Component, ProviderBase
from jerga.util.di.core import ProdConfigProvider
from jerga.util.di.domain import ProdDomainProvider
from jerga.util.di.infrastructure import (
    ClockProvider,
    PersistenceProvider,
    ProdClockProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Concrete providers
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable components
    ClockProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider entry to the class to instantiate.

    Concrete providers have no subclasses and are returned as is. For a
    swappable component, the subclass whose ``__is_mock__`` matches
    ``use_mock`` is returned; test fakes only register once ``tests.di``
    has been imported.

    Args:
        base: Entry from PROVIDERS
        use_mock: Whether to pick the test implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "ClockProvider",
    "PersistenceProvider",
    "ProdClockProvider",
    "ProdPersistenceProvider",
]
