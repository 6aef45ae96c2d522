"""Dependency injection module."""

from typing import Type

from nexus.util.di.application import ProdApplicationProvider
from nexus.util.di.base import Component, ProviderBase
from nexus.util.di.core import ProdConfigProvider
from nexus.util.di.domain import ProdDomainProvider
from nexus.util.di.infrastructure import (
    IdentityProvider,
    LanguageModelProvider,
    PersistenceProvider,
    ProdIdentityProvider,
    ProdLanguageModelProvider,
    ProdPersistenceProvider,
    ProdWebProvider,
    WebProvider,
)
from nexus.util.error import DependencyInjectionError

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    IdentityProvider,
    LanguageModelProvider,
    WebProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    A provider without subclasses is concrete and used as-is. A provider
    with subclasses is a mockable component, and the subclass whose
    ``__is_mock__`` matches ``use_mock`` is selected.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise DependencyInjectionError(component_name, use_mock)

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "IdentityProvider",
    "LanguageModelProvider",
    "PersistenceProvider",
    "WebProvider",
    # Infrastructure implementations
    "ProdIdentityProvider",
    "ProdLanguageModelProvider",
    "ProdPersistenceProvider",
    "ProdWebProvider",
]
