"""Redeem invite use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from nexus.domain.service import ConnectionService
from nexus.domain.value import RedemptionOutcome, UserId

REDEMPTION_ERRORS: dict[RedemptionOutcome, str] = {
    RedemptionOutcome.NOT_FOUND: "Invalid or expired invite code",
    RedemptionOutcome.SELF_INVITE: "You can't accept your own invite",
    RedemptionOutcome.ALREADY_CONNECTED: "Already connected",
    RedemptionOutcome.MISSING_PROFILE: "Could not find user profiles",
    RedemptionOutcome.UPSTREAM_ERROR: "Could not redeem invite code",
}


class RedeemInviteRequest(BaseModel):
    """Redeem invite request."""

    invitee_id: str
    code: str


class RedeemInviteResponse(BaseModel):
    """Redeem invite response."""

    success: bool
    error: str | None = None
    outcome: RedemptionOutcome
    connection_id: str | None = None


class RedeemInviteUseCase:
    """Use case for a signed-in user entering an invite code."""

    def __init__(self, connection_service: ConnectionService) -> None:
        """Initialize redeem invite use case.

        Args:
            connection_service: Connection domain service
        """
        self.connection_service = connection_service

    async def execute(self, request: RedeemInviteRequest) -> RedeemInviteResponse:
        """Redeem the code and translate the outcome for the client.

        Never raises for redemption failures; they are reported in ``error``.
        """
        with logfire.span("redeem_invite.execute", invitee_id=request.invitee_id):
            result = await self.connection_service.redeem_invite(
                UserId(UUID(request.invitee_id)), request.code
            )
            return RedeemInviteResponse(
                success=result.ok,
                error=REDEMPTION_ERRORS.get(result.outcome),
                outcome=result.outcome,
                connection_id=str(result.connection_id) if result.connection_id else None,
            )
