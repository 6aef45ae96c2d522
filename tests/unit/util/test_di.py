"""Unit tests for provider selection and the test container."""

from dishka import Provider, Scope, make_async_container, provide
import pytest

from nexus.config import IdentitySettings, Settings
from nexus.domain.service import IdentityClient
from nexus.util.di import (
    PROVIDERS,
    IdentityProvider,
    PersistenceProvider,
    ProdApplicationProvider,
    ProdIdentityProvider,
    ProviderBase,
    get_provider,
)
from nexus.util.error import ConfigurationError, DependencyInjectionError
from tests.di import MockIdentityProvider, MockPersistenceProvider, build_test_container


class _ProdOnlyProvider(ProviderBase):
    __mock_component__ = "prod_only"


class _ProdOnlyImplementation(_ProdOnlyProvider):
    __is_mock__ = False


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_used_as_is(self):
        assert get_provider(ProdApplicationProvider) is ProdApplicationProvider

    def test_selects_implementation_by_mock_flag(self):
        assert get_provider(IdentityProvider, use_mock=False) is ProdIdentityProvider
        assert get_provider(IdentityProvider, use_mock=True) is MockIdentityProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_missing_mock_raises(self):
        with pytest.raises(
            DependencyInjectionError, match="No mock implementation for prod_only"
        ) as exc_info:
            get_provider(_ProdOnlyProvider, use_mock=True)

        assert exc_info.value.component == "prod_only"
        assert exc_info.value.use_mock is True

    def test_every_component_has_a_mock(self):
        for base in PROVIDERS:
            if base.__subclasses__():
                assert getattr(get_provider(base, use_mock=True), "__is_mock__")


class TestBuildTestContainer:
    """Tests for unmock validation."""

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"telepathy"})  # type: ignore[arg-type]


class _FixedSettingsProvider(Provider):
    def __init__(self, settings: Settings):
        super().__init__()
        self.settings = settings

    @provide(scope=Scope.APP)
    def get_settings(self) -> Settings:
        return self.settings


class TestProdIdentityProvider:
    """Tests for identity client wiring."""

    @pytest.mark.asyncio
    async def test_missing_url_names_the_setting(self):
        settings = Settings(identity=IdentitySettings(url=""))
        container = make_async_container(
            ProdIdentityProvider(), _FixedSettingsProvider(settings)
        )

        with pytest.raises(ConfigurationError, match="set IDENTITY__URL") as exc_info:
            await container.get(IdentityClient)

        assert exc_info.value.setting == "IDENTITY__URL"
        await container.close()
