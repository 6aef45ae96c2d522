"""Application layer DI providers."""

from dishka import Scope, provide

from nexus.application.usecase.auth import GetCurrentUserUseCase, HandleCallbackUseCase
from nexus.application.usecase.chronicle import (
    AnnotateContactUseCase,
    AnnotateWorkEntryUseCase,
    DeleteItemUseCase,
    LoadChronicleUseCase,
    SaveEntryUseCase,
    SavePlaceUseCase,
    UpdateEntryDatesUseCase,
)
from nexus.application.usecase.connection import (
    CreateInviteUseCase,
    GetConnectionsUseCase,
    GetPendingInvitesUseCase,
    RedeemInviteUseCase,
)
from nexus.application.usecase.insight import (
    GenerateSynergyUseCase,
    SummarizeContactUseCase,
)
from nexus.config import Settings
from nexus.domain.service import (
    AuthService,
    ChronicleService,
    ConnectionService,
    InsightService,
    JWTService,
    ProfileService,
)
from nexus.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_handle_callback_use_case(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        profile_service: ProfileService,
        connection_service: ConnectionService,
        settings: Settings,
    ) -> HandleCallbackUseCase:
        """Provide auth callback use case."""
        return HandleCallbackUseCase(
            auth_service=auth_service,
            jwt_service=jwt_service,
            profile_service=profile_service,
            connection_service=connection_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, profile_service: ProfileService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, profile_service=profile_service
        )

    # Connection use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invite_use_case(
        self, connection_service: ConnectionService
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(connection_service=connection_service)

    @provide(scope=Scope.REQUEST)
    def get_redeem_invite_use_case(
        self, connection_service: ConnectionService
    ) -> RedeemInviteUseCase:
        """Provide redeem invite use case."""
        return RedeemInviteUseCase(connection_service=connection_service)

    @provide(scope=Scope.REQUEST)
    def get_get_connections_use_case(
        self, connection_service: ConnectionService
    ) -> GetConnectionsUseCase:
        """Provide get connections use case."""
        return GetConnectionsUseCase(connection_service=connection_service)

    @provide(scope=Scope.REQUEST)
    def get_get_pending_invites_use_case(
        self, connection_service: ConnectionService
    ) -> GetPendingInvitesUseCase:
        """Provide get pending invites use case."""
        return GetPendingInvitesUseCase(connection_service=connection_service)

    # Chronicle use cases
    @provide(scope=Scope.REQUEST)
    def get_load_chronicle_use_case(
        self, chronicle_service: ChronicleService
    ) -> LoadChronicleUseCase:
        """Provide load chronicle use case."""
        return LoadChronicleUseCase(chronicle_service=chronicle_service)

    @provide(scope=Scope.REQUEST)
    def get_save_entry_use_case(
        self, chronicle_service: ChronicleService
    ) -> SaveEntryUseCase:
        """Provide save entry use case."""
        return SaveEntryUseCase(chronicle_service=chronicle_service)

    @provide(scope=Scope.REQUEST)
    def get_update_entry_dates_use_case(
        self, chronicle_service: ChronicleService
    ) -> UpdateEntryDatesUseCase:
        """Provide update entry dates use case."""
        return UpdateEntryDatesUseCase(chronicle_service=chronicle_service)

    @provide(scope=Scope.REQUEST)
    def get_save_place_use_case(
        self, chronicle_service: ChronicleService
    ) -> SavePlaceUseCase:
        """Provide save place use case."""
        return SavePlaceUseCase(chronicle_service=chronicle_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_item_use_case(
        self, chronicle_service: ChronicleService
    ) -> DeleteItemUseCase:
        """Provide delete chronicle item use case."""
        return DeleteItemUseCase(chronicle_service=chronicle_service)

    @provide(scope=Scope.REQUEST)
    def get_annotate_work_entry_use_case(
        self, chronicle_service: ChronicleService
    ) -> AnnotateWorkEntryUseCase:
        """Provide annotate work entry use case."""
        return AnnotateWorkEntryUseCase(chronicle_service=chronicle_service)

    @provide(scope=Scope.REQUEST)
    def get_annotate_contact_use_case(
        self, chronicle_service: ChronicleService
    ) -> AnnotateContactUseCase:
        """Provide annotate contact use case."""
        return AnnotateContactUseCase(chronicle_service=chronicle_service)

    # Insight use cases
    @provide(scope=Scope.REQUEST)
    def get_generate_synergy_use_case(
        self, insight_service: InsightService
    ) -> GenerateSynergyUseCase:
        """Provide generate synergy use case."""
        return GenerateSynergyUseCase(insight_service=insight_service)

    @provide(scope=Scope.REQUEST)
    def get_summarize_contact_use_case(
        self, insight_service: InsightService
    ) -> SummarizeContactUseCase:
        """Provide summarize contact use case."""
        return SummarizeContactUseCase(insight_service=insight_service)
