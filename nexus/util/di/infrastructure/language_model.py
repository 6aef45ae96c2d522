"""Language model infrastructure providers."""

from dishka import Scope, provide

from nexus.adapter.anthropic import AnthropicClient
from nexus.config import AISettings
from nexus.domain.service import LanguageModelClient
from nexus.util.di.base import ProviderBase


class LanguageModelProvider(ProviderBase):
    """Language model component base."""

    __mock_component__ = "language_model"


class ProdLanguageModelProvider(LanguageModelProvider):
    """Production language model provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_language_model_client(self, ai_settings: AISettings) -> LanguageModelClient:
        """Provide the Anthropic client.

        A missing API key is not fatal at startup: AI routes report it per
        request.
        """
        return AnthropicClient(api_key=ai_settings.anthropic_api_key)
