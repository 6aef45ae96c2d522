"""Domain layer DI providers."""

from dishka import Scope, provide

from nexus.config import AISettings, AuthSettings
from nexus.domain.repository import (
    ChronicleRepository,
    ConnectionRepository,
    ContactRepository,
    ProfileRepository,
    WorkEntryRepository,
)
from nexus.domain.service import (
    AuthService,
    ChronicleService,
    ConnectionService,
    IdentityClient,
    InsightService,
    JWTService,
    LanguageModelClient,
    PageFetcher,
    ProfileService,
)
from nexus.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, identity_client: IdentityClient) -> AuthService:
        """Provide identity provider authentication service."""
        return AuthService(identity_client=identity_client)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_connection_service(
        self,
        connection_repository: ConnectionRepository,
        contact_repository: ContactRepository,
        profile_repository: ProfileRepository,
    ) -> ConnectionService:
        """Provide connection domain service."""
        return ConnectionService(
            connection_repository=connection_repository,
            contact_repository=contact_repository,
            profile_repository=profile_repository,
        )

    @provide
    def get_chronicle_service(
        self,
        chronicle_repository: ChronicleRepository,
        work_entry_repository: WorkEntryRepository,
        contact_repository: ContactRepository,
    ) -> ChronicleService:
        """Provide chronicle domain service."""
        return ChronicleService(
            chronicle_repository=chronicle_repository,
            work_entry_repository=work_entry_repository,
            contact_repository=contact_repository,
        )

    @provide
    def get_insight_service(
        self,
        language_model: LanguageModelClient,
        page_fetcher: PageFetcher,
        ai_settings: AISettings,
    ) -> InsightService:
        """Provide insight domain service."""
        return InsightService(
            language_model=language_model,
            page_fetcher=page_fetcher,
            max_source_urls=ai_settings.max_source_urls,
            max_source_chars=ai_settings.max_source_chars,
        )
