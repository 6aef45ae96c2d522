"""Connection entity.

A connection starts life as a pending invite created by the inviter and
becomes accepted, exactly once, when someone redeems its code.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from nexus.domain.model.common import DomainModel
from nexus.domain.value import (
    ConnectionId,
    ConnectionStatus,
    ContactId,
    InviteCode,
    UserId,
)


class Connection(DomainModel):
    """Connection between two users, keyed by a shareable invite code.

    Business rules:
    - Invite codes are unique across all connections
    - ``invitee_id`` is set in the same write that marks it accepted
    - Connections are never deleted by invite flows
    """

    id: ConnectionId
    invite_code: InviteCode
    inviter_id: UserId
    invitee_id: Optional[UserId] = None
    contact_id: Optional[ContactId] = None  # Inviter's placeholder card
    status: ConnectionStatus = ConnectionStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
    accepted_at: Optional[datetime] = None

    def involves(self, user_id: UserId) -> bool:
        """Whether the user is on either side of this connection."""
        return self.inviter_id == user_id or self.invitee_id == user_id

    def counterpart_of(self, user_id: UserId) -> Optional[UserId]:
        """The other side of the connection from ``user_id``."""
        if self.inviter_id == user_id:
            return self.invitee_id
        return self.inviter_id
