"""Get connections use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from nexus.domain.model import Connection
from nexus.domain.service import ConnectionService
from nexus.domain.value import ConnectionStatus, UserId


class ConnectionInfo(BaseModel):
    """Connection information for response."""

    id: str
    invite_code: str
    inviter_id: str
    invitee_id: str | None
    contact_id: str | None
    status: ConnectionStatus
    created_at: datetime
    accepted_at: datetime | None

    @classmethod
    def from_connection(cls, connection: Connection) -> "ConnectionInfo":
        """Build from a domain connection."""
        return cls(
            id=str(connection.id),
            invite_code=connection.invite_code.root,
            inviter_id=str(connection.inviter_id),
            invitee_id=str(connection.invitee_id) if connection.invitee_id else None,
            contact_id=str(connection.contact_id) if connection.contact_id else None,
            status=connection.status,
            created_at=connection.created_at,
            accepted_at=connection.accepted_at,
        )


class GetConnectionsRequest(BaseModel):
    """Get connections request."""

    user_id: str


class GetConnectionsResponse(BaseModel):
    """Get connections response."""

    connections: list[ConnectionInfo]


class GetConnectionsUseCase:
    """Use case for listing a user's accepted connections."""

    def __init__(self, connection_service: ConnectionService) -> None:
        self.connection_service = connection_service

    async def execute(self, request: GetConnectionsRequest) -> GetConnectionsResponse:
        """List accepted connections on either side of the user."""
        connections = await self.connection_service.list_connections(
            UserId(UUID(request.user_id))
        )
        return GetConnectionsResponse(
            connections=[ConnectionInfo.from_connection(c) for c in connections]
        )
