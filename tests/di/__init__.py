"""Mock providers for testing."""

from .identity import MockIdentityProvider
from .language_model import MockLanguageModelProvider
from .persistence import MockPersistenceProvider
from .web import MockWebProvider
from .container import build_test_container

__all__ = [
    "MockIdentityProvider",
    "MockLanguageModelProvider",
    "MockPersistenceProvider",
    "MockWebProvider",
    "build_test_container",
]
