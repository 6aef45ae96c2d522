"""Create invite use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from nexus.domain.service import ConnectionService
from nexus.domain.value import ContactId, UserId


class CreateInviteRequest(BaseModel):
    """Create invite request."""

    inviter_id: str
    contact_id: UUID


class CreateInviteResponse(BaseModel):
    """Create invite response."""

    code: str


class CreateInviteUseCase:
    """Use case for issuing an invite code for a contact."""

    def __init__(self, connection_service: ConnectionService) -> None:
        """Initialize create invite use case.

        Args:
            connection_service: Connection domain service
        """
        self.connection_service = connection_service

    async def execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        """Issue (or reuse) the contact's invite code.

        Raises:
            NotFoundError: If the contact is not the inviter's
            BusinessRuleViolationError: If no unique code could be generated
        """
        with logfire.span("create_invite.execute", inviter_id=request.inviter_id):
            code = await self.connection_service.create_invite(
                UserId(UUID(request.inviter_id)), ContactId(request.contact_id)
            )
            return CreateInviteResponse(code=code)
