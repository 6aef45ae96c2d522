"""Connection repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from datetime import datetime

from nexus.domain.model.connection import Connection
from nexus.domain.value import ConnectionId, ContactId, InviteCode, UserId


class ConnectionRepository(ABC):
    """Repository for Connection entity.

    Writes are limited to a conditional insert (unique invite code) and a
    conditional pending -> accepted update.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Group store writes so a failure undoes only this group.

        Writes made inside the block are discarded if it raises. Writes made
        earlier in the same unit of work are kept.

        Usage:
            async with connection_repository.atomic():
                ...
        """
        pass

    @abstractmethod
    async def find_pending_by_code(self, code: InviteCode) -> Connection | None:
        """Find the pending connection holding an invite code.

        Args:
            code: Normalized invite code

        Returns:
            The pending connection if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_by_inviter_and_contact(
        self, inviter_id: UserId, contact_id: ContactId
    ) -> Connection | None:
        """Find a pending invite already issued for a contact.

        Args:
            inviter_id: User who issued the invite
            contact_id: Inviter's placeholder card

        Returns:
            The pending connection if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_accepted_between(self, user_a: UserId, user_b: UserId) -> bool:
        """Check for an accepted connection between two users, either direction.

        Args:
            user_a: One user
            user_b: The other user

        Returns:
            True if the two users are connected
        """
        pass

    @abstractmethod
    async def insert(self, connection: Connection) -> Connection:
        """Insert a new pending connection.

        Args:
            connection: The connection to insert

        Returns:
            The inserted connection

        Raises:
            DuplicateInviteCodeError: If the invite code is already taken
        """
        pass

    @abstractmethod
    async def mark_accepted(
        self,
        connection_id: ConnectionId,
        invitee_id: UserId,
        contact_id: ContactId | None,
        accepted_at: datetime,
    ) -> bool:
        """Accept a connection if it is still pending.

        Args:
            connection_id: Connection to accept
            invitee_id: User redeeming the code
            contact_id: Inviter's card for the invitee
            accepted_at: Acceptance time

        Returns:
            True if this call accepted it, False if it was no longer pending
        """
        pass

    @abstractmethod
    async def find_accepted_for_user(self, user_id: UserId) -> list[Connection]:
        """Find accepted connections on either side of a user.

        Args:
            user_id: The user

        Returns:
            Connections, most recently accepted first
        """
        pass

    @abstractmethod
    async def find_pending_by_inviter(self, inviter_id: UserId) -> list[Connection]:
        """Find pending invites issued by a user.

        Args:
            inviter_id: The inviter

        Returns:
            Pending connections, newest first
        """
        pass
