"""Connection domain service.

Owns the invite lifecycle: issuing a code for a contact, and redeeming a
code to connect two users with a contact card in each direction.
"""

import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from nexus.domain.error import (
    BusinessRuleViolationError,
    DuplicateInviteCodeError,
    NotFoundError,
)
from nexus.domain.model import Connection, Contact, Profile
from nexus.domain.repository import (
    ConnectionRepository,
    ContactRepository,
    ProfileRepository,
)
from nexus.domain.value import (
    ConnectionId,
    ConnectionStatus,
    ContactId,
    InviteCode,
    RedemptionOutcome,
    RedemptionResult,
    UserId,
)

from .base import Service

INVITE_CODE_PREFIX = "NEXUS-"
INVITE_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"  # No 0/O or 1/I
INVITE_CODE_LENGTH = 6
MAX_CODE_ATTEMPTS = 5


def generate_invite_code() -> str:
    """Generate a random invite code such as ``NEXUS-7Q2K9P``."""
    suffix = "".join(
        secrets.choice(INVITE_CODE_ALPHABET) for _ in range(INVITE_CODE_LENGTH)
    )
    return f"{INVITE_CODE_PREFIX}{suffix}"


@dataclass
class PendingInvite:
    """A pending invite together with the name on its placeholder card."""

    connection: Connection
    contact_name: str | None


class ConnectionService(Service):
    """Domain service for invites and connections."""

    def __init__(
        self,
        connection_repository: ConnectionRepository,
        contact_repository: ContactRepository,
        profile_repository: ProfileRepository,
        code_generator: Callable[[], str] = generate_invite_code,
    ) -> None:
        """Initialize connection service.

        Args:
            connection_repository: Connection repository
            contact_repository: Contact repository
            profile_repository: Profile repository
            code_generator: Source of new invite codes
        """
        self.connection_repository = connection_repository
        self.contact_repository = contact_repository
        self.profile_repository = profile_repository
        self.code_generator = code_generator

    async def create_invite(self, inviter_id: UserId, contact_id: ContactId) -> str:
        """Issue an invite code for one of the inviter's contacts.

        A contact has at most one pending code; asking again returns it.

        Args:
            inviter_id: User issuing the invite
            contact_id: Inviter's placeholder card for the invitee

        Returns:
            The invite code

        Raises:
            NotFoundError: If the contact does not exist or is not the inviter's
            BusinessRuleViolationError: If no unique code could be generated
        """
        with logfire.span(
            "connection_service.create_invite",
            inviter_id=str(inviter_id),
            contact_id=str(contact_id),
        ):
            contact = await self.contact_repository.find_by_id(contact_id)
            if contact is None or contact.owner_id != inviter_id:
                logfire.warn(
                    "Invite requested for unknown contact",
                    inviter_id=str(inviter_id),
                    contact_id=str(contact_id),
                )
                raise NotFoundError("Contact", str(contact_id))

            existing = (
                await self.connection_repository.find_pending_by_inviter_and_contact(
                    inviter_id, contact_id
                )
            )
            if existing:
                logfire.info(
                    "Reusing pending invite",
                    connection_id=str(existing.id),
                    contact_id=str(contact_id),
                )
                return existing.invite_code.root

            for attempt in range(1, MAX_CODE_ATTEMPTS + 1):
                connection = Connection(
                    id=ConnectionId(uuid4()),
                    invite_code=InviteCode(self.code_generator()),
                    inviter_id=inviter_id,
                    contact_id=contact_id,
                    status=ConnectionStatus.PENDING,
                    created_at=datetime.now(),
                )
                try:
                    saved = await self.connection_repository.insert(connection)
                except DuplicateInviteCodeError:
                    logfire.warn("Invite code collision", attempt=attempt)
                    continue

                logfire.info(
                    "Invite created",
                    connection_id=str(saved.id),
                    inviter_id=str(inviter_id),
                )
                return saved.invite_code.root

            logfire.error(
                "Invite code generation exhausted", attempts=MAX_CODE_ATTEMPTS
            )
            raise BusinessRuleViolationError(
                f"Failed to generate unique code after {MAX_CODE_ATTEMPTS} attempts"
            )

    async def redeem_invite(self, invitee_id: UserId, raw_code: str) -> RedemptionResult:
        """Redeem an invite code on behalf of the invitee.

        On success the connection is accepted and each side owns a contact
        card linked to the other's profile. Redeeming is idempotent: a second
        call for the same pair reports ``ALREADY_CONNECTED`` and writes nothing.

        Never raises; store failures are logged and reported as
        ``UPSTREAM_ERROR``. The redemption writes run as one atomic group, so
        a failure undoes them without touching earlier writes of the caller,
        such as the profile created during sign-in.

        Args:
            invitee_id: User redeeming the code
            raw_code: Code as typed, in any case and with stray whitespace

        Returns:
            Typed redemption result
        """
        with logfire.span(
            "connection_service.redeem_invite", invitee_id=str(invitee_id)
        ):
            try:
                code = InviteCode(raw_code)
            except ValueError:
                logfire.info("Malformed invite code", invitee_id=str(invitee_id))
                return RedemptionResult(outcome=RedemptionOutcome.NOT_FOUND)

            try:
                async with self.connection_repository.atomic():
                    result = await self._redeem(invitee_id, code)
            except Exception as e:
                logfire.error(
                    "Invite redemption failed",
                    invitee_id=str(invitee_id),
                    code=code.root,
                    error=str(e),
                )
                return RedemptionResult(outcome=RedemptionOutcome.UPSTREAM_ERROR)

            logfire.info(
                "Invite redemption finished",
                invitee_id=str(invitee_id),
                code=code.root,
                outcome=result.outcome.value,
            )
            return result

    async def _redeem(self, invitee_id: UserId, code: InviteCode) -> RedemptionResult:
        connection = await self.connection_repository.find_pending_by_code(code)
        if connection is None:
            return RedemptionResult(outcome=RedemptionOutcome.NOT_FOUND)

        if connection.inviter_id == invitee_id:
            return RedemptionResult(
                outcome=RedemptionOutcome.SELF_INVITE, connection_id=connection.id
            )

        if await self.connection_repository.exists_accepted_between(
            connection.inviter_id, invitee_id
        ):
            return RedemptionResult(
                outcome=RedemptionOutcome.ALREADY_CONNECTED,
                connection_id=connection.id,
            )

        inviter = await self.profile_repository.find_by_id(connection.inviter_id)
        invitee = await self.profile_repository.find_by_id(invitee_id)
        if inviter is None or invitee is None:
            return RedemptionResult(
                outcome=RedemptionOutcome.MISSING_PROFILE,
                connection_id=connection.id,
            )

        inviter_contact_id = await self._ensure_inviter_card(connection, invitee)
        invitee_card = await self._ensure_card(owner_id=invitee_id, counterpart=inviter)

        accepted = await self.connection_repository.mark_accepted(
            connection.id,
            invitee_id=invitee_id,
            contact_id=inviter_contact_id,
            accepted_at=datetime.now(),
        )
        if not accepted:
            # Another redemption of this code won the pending -> accepted race
            return RedemptionResult(
                outcome=RedemptionOutcome.ALREADY_CONNECTED,
                connection_id=connection.id,
            )

        return RedemptionResult(
            outcome=RedemptionOutcome.OK,
            connection_id=connection.id,
            inviter_contact_id=inviter_contact_id,
            invitee_contact_id=invitee_card.id,
        )

    async def _ensure_inviter_card(
        self, connection: Connection, invitee: Profile
    ) -> ContactId:
        """Find, link or create the inviter's card for the invitee."""
        existing = await self.contact_repository.find_by_owner_and_linked_profile(
            connection.inviter_id, invitee.id
        )
        if existing:
            return existing.id

        if connection.contact_id is not None:
            await self.contact_repository.link_profile(connection.contact_id, invitee.id)
            logfire.info(
                "Placeholder contact linked",
                contact_id=str(connection.contact_id),
                linked_profile_id=str(invitee.id),
            )
            return connection.contact_id

        card = await self._ensure_card(
            owner_id=connection.inviter_id, counterpart=invitee
        )
        return card.id

    async def _ensure_card(self, owner_id: UserId, counterpart: Profile) -> Contact:
        """Find or create ``owner_id``'s card linked to ``counterpart``."""
        existing = await self.contact_repository.find_by_owner_and_linked_profile(
            owner_id, counterpart.id
        )
        if existing:
            return existing

        card = Contact.from_profile(ContactId(uuid4()), owner_id, counterpart)
        stored = await self.contact_repository.insert_if_absent(card)
        logfire.info(
            "Connection contact ensured",
            contact_id=str(stored.id),
            owner_id=str(owner_id),
            linked_profile_id=str(counterpart.id),
        )
        return stored

    async def list_connections(self, user_id: UserId) -> list[Connection]:
        """List accepted connections on either side of the user.

        Args:
            user_id: The user

        Returns:
            Accepted connections
        """
        with logfire.span("connection_service.list_connections", user_id=str(user_id)):
            return await self.connection_repository.find_accepted_for_user(user_id)

    async def list_pending_invites(self, user_id: UserId) -> list[PendingInvite]:
        """List the user's outstanding invites with their contact names.

        Args:
            user_id: The inviter

        Returns:
            Pending invites, newest first
        """
        with logfire.span(
            "connection_service.list_pending_invites", user_id=str(user_id)
        ):
            connections = await self.connection_repository.find_pending_by_inviter(
                user_id
            )
            invites = []
            for connection in connections:
                contact_name = None
                if connection.contact_id is not None:
                    contact = await self.contact_repository.find_by_id(
                        connection.contact_id
                    )
                    contact_name = contact.full_name if contact else None
                invites.append(
                    PendingInvite(connection=connection, contact_name=contact_name)
                )
            return invites
