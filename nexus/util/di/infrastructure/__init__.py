"""Infrastructure providers."""

# Import bases
from .identity import IdentityProvider
from .language_model import LanguageModelProvider
from .persistence import PersistenceProvider
from .web import WebProvider

# Import implementations (needed for __subclasses__())
from .identity import ProdIdentityProvider  # noqa: F401
from .language_model import ProdLanguageModelProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .web import ProdWebProvider  # noqa: F401

__all__ = [
    "IdentityProvider",
    "LanguageModelProvider",
    "PersistenceProvider",
    "ProdIdentityProvider",
    "ProdLanguageModelProvider",
    "ProdPersistenceProvider",
    "ProdWebProvider",
    "WebProvider",
]
