"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from nexus.adapter.identity import RealIdentityClient
from nexus.config import Settings
from nexus.domain.service import IdentityClient
from nexus.util.di.base import ProviderBase
from nexus.util.error import ConfigurationError


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider client."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: Settings) -> IdentityClient:
        """Provide the GoTrue client.

        Raises:
            ConfigurationError: If the identity provider URL is not configured
        """
        if not settings.identity.url:
            raise ConfigurationError(
                "IDENTITY__URL", "Identity provider URL must be configured"
            )

        return RealIdentityClient(
            base_url=settings.identity.url,
            anon_key=settings.identity.anon_key,
        )
