"""Connection use cases."""

from nexus.application.usecase.connection.create_invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
)
from nexus.application.usecase.connection.get_connections import (
    ConnectionInfo,
    GetConnectionsRequest,
    GetConnectionsResponse,
    GetConnectionsUseCase,
)
from nexus.application.usecase.connection.get_pending_invites import (
    GetPendingInvitesRequest,
    GetPendingInvitesResponse,
    GetPendingInvitesUseCase,
    PendingInviteInfo,
)
from nexus.application.usecase.connection.redeem_invite import (
    REDEMPTION_ERRORS,
    RedeemInviteRequest,
    RedeemInviteResponse,
    RedeemInviteUseCase,
)

__all__ = [
    "ConnectionInfo",
    "CreateInviteRequest",
    "CreateInviteResponse",
    "CreateInviteUseCase",
    "GetConnectionsRequest",
    "GetConnectionsResponse",
    "GetConnectionsUseCase",
    "GetPendingInvitesRequest",
    "GetPendingInvitesResponse",
    "GetPendingInvitesUseCase",
    "PendingInviteInfo",
    "REDEMPTION_ERRORS",
    "RedeemInviteRequest",
    "RedeemInviteResponse",
    "RedeemInviteUseCase",
]
