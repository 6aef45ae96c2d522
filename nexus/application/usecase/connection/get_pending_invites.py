"""Get pending invites use case."""

from uuid import UUID

from pydantic import BaseModel

from nexus.application.usecase.connection.get_connections import ConnectionInfo
from nexus.domain.service import ConnectionService
from nexus.domain.value import UserId


class PendingInviteInfo(ConnectionInfo):
    """Pending invite with the placeholder contact's name."""

    contact_name: str | None


class GetPendingInvitesRequest(BaseModel):
    """Get pending invites request."""

    user_id: str


class GetPendingInvitesResponse(BaseModel):
    """Get pending invites response."""

    invites: list[PendingInviteInfo]


class GetPendingInvitesUseCase:
    """Use case for listing the invites a user has issued but nobody redeemed."""

    def __init__(self, connection_service: ConnectionService) -> None:
        self.connection_service = connection_service

    async def execute(
        self, request: GetPendingInvitesRequest
    ) -> GetPendingInvitesResponse:
        """List the user's pending invites, newest first."""
        pending = await self.connection_service.list_pending_invites(
            UserId(UUID(request.user_id))
        )
        return GetPendingInvitesResponse(
            invites=[
                PendingInviteInfo(
                    **ConnectionInfo.from_connection(item.connection).model_dump(),
                    contact_name=item.contact_name,
                )
                for item in pending
            ]
        )
