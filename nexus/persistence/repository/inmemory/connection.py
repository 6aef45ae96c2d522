"""In-memory connection repository for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from nexus.domain.error import DuplicateInviteCodeError
from nexus.domain.model import Connection
from nexus.domain.repository import ConnectionRepository
from nexus.domain.value import (
    ConnectionId,
    ConnectionStatus,
    ContactId,
    InviteCode,
    UserId,
)


class InMemoryConnectionRepository(ConnectionRepository):
    """In-memory implementation of ConnectionRepository for testing."""

    def __init__(self) -> None:
        self._connections: dict[ConnectionId, Connection] = {}

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        """Restore this repository's connections if the block raises."""
        snapshot = dict(self._connections)
        try:
            yield
        except Exception:
            self._connections = snapshot
            raise

    async def find_pending_by_code(self, code: InviteCode) -> Optional[Connection]:
        """Find the pending connection holding an invite code."""
        for connection in self._connections.values():
            if (
                connection.invite_code == code
                and connection.status == ConnectionStatus.PENDING
            ):
                return connection
        return None

    async def find_pending_by_inviter_and_contact(
        self, inviter_id: UserId, contact_id: ContactId
    ) -> Optional[Connection]:
        """Find a pending invite already issued for a contact."""
        for connection in self._connections.values():
            if (
                connection.inviter_id == inviter_id
                and connection.contact_id == contact_id
                and connection.status == ConnectionStatus.PENDING
            ):
                return connection
        return None

    async def exists_accepted_between(self, user_a: UserId, user_b: UserId) -> bool:
        """Check for an accepted connection between two users, either direction."""
        return any(
            c.status == ConnectionStatus.ACCEPTED
            and {c.inviter_id, c.invitee_id} == {user_a, user_b}
            for c in self._connections.values()
        )

    async def insert(self, connection: Connection) -> Connection:
        """Insert a new pending connection.

        Raises:
            DuplicateInviteCodeError: If the invite code is already taken
        """
        if any(c.invite_code == connection.invite_code for c in self._connections.values()):
            raise DuplicateInviteCodeError(connection.invite_code.root)
        self._connections[connection.id] = connection
        return connection

    async def mark_accepted(
        self,
        connection_id: ConnectionId,
        invitee_id: UserId,
        contact_id: ContactId | None,
        accepted_at: datetime,
    ) -> bool:
        """Accept a connection if it is still pending."""
        connection = self._connections.get(connection_id)
        if connection is None or connection.status != ConnectionStatus.PENDING:
            return False

        update = {
            "invitee_id": invitee_id,
            "status": ConnectionStatus.ACCEPTED,
            "accepted_at": accepted_at,
        }
        if contact_id is not None:
            update["contact_id"] = contact_id
        self._connections[connection_id] = connection.model_copy(update=update)
        return True

    async def find_accepted_for_user(self, user_id: UserId) -> list[Connection]:
        """Find accepted connections on either side of a user."""
        return sorted(
            (
                c
                for c in self._connections.values()
                if c.status == ConnectionStatus.ACCEPTED and c.involves(user_id)
            ),
            key=lambda c: c.accepted_at or c.created_at,
            reverse=True,
        )

    async def find_pending_by_inviter(self, inviter_id: UserId) -> list[Connection]:
        """Find pending invites issued by a user."""
        return sorted(
            (
                c
                for c in self._connections.values()
                if c.status == ConnectionStatus.PENDING and c.inviter_id == inviter_id
            ),
            key=lambda c: c.created_at,
            reverse=True,
        )

    def all(self) -> list[Connection]:
        """All stored connections, for test assertions."""
        return list(self._connections.values())
