"""Domain value objects for Nexus.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator

from nexus.domain.value.common import RootValueObject, ValueObject
from nexus.domain.value.identifiers import ConnectionId, ContactId

# Relationship type given to contact cards created by accepting an invite
CONNECTION_RELATIONSHIP = "connection"


class ConnectionStatus(str, Enum):
    """Status of a connection."""

    PENDING = "pending"
    ACCEPTED = "accepted"


class InviteCode(RootValueObject[str]):
    """Invite code shared out of band, e.g. ``NEXUS-7Q2K9P``.

    Codes are case-insensitive: the stored and looked-up form is trimmed
    and upper-cased, so ``" nexus-ab12cd "`` and ``"NEXUS-AB12CD"`` are the
    same code.
    """

    @field_validator("root")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        """Trim and upper-case the code."""
        v = v.strip().upper()
        if len(v) < 1 or len(v) > 32:
            raise ValueError("Invite code must be 1-32 characters")
        return v


class RedemptionOutcome(str, Enum):
    """Result of redeeming an invite code.

    SELF_INVITE and ALREADY_CONNECTED are the invalid-state outcomes:
    the code exists but accepting it would be meaningless.
    """

    OK = "ok"
    NOT_FOUND = "not_found"
    SELF_INVITE = "self_invite"
    ALREADY_CONNECTED = "already_connected"
    MISSING_PROFILE = "missing_profile"
    UPSTREAM_ERROR = "upstream_error"


class RedemptionResult(ValueObject):
    """Typed outcome of an invite redemption."""

    outcome: RedemptionOutcome
    connection_id: ConnectionId | None = None
    inviter_contact_id: ContactId | None = None
    invitee_contact_id: ContactId | None = None

    @property
    def ok(self) -> bool:
        """Whether the invite was accepted."""
        return self.outcome == RedemptionOutcome.OK


class IdentitySession(ValueObject):
    """Session returned by the identity provider after a code exchange."""

    user_id: str
    email: str
    access_token: str
    user_metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def invite_code(self) -> str | None:
        """Invite code the user entered at signup, if any."""
        code = self.user_metadata.get("invite_code")
        if isinstance(code, str) and code.strip():
            return code
        return None

    @property
    def full_name(self) -> str | None:
        """Display name the user gave at signup, if any."""
        name = self.user_metadata.get("full_name")
        return name if isinstance(name, str) and name else None


class SynergyNote(ValueObject):
    """Three drafted paragraphs about two people's overlap."""

    help_them: str
    help_me: str
    common_ground: str


class ContactSummary(ValueObject):
    """Drafted summary of a contact."""

    summary: str
    oneliner: str


class ChronicleAnnotation(ValueObject):
    """Chronicle display columns carried by work entries and contacts.

    Only fields explicitly provided are written; see ``changes``.
    """

    color: str | None = None
    fuzzy_start: bool | None = None
    fuzzy_end: bool | None = None
    note: str | None = None

    def changes(self) -> dict[str, Any]:
        """Provided fields keyed by their ``chronicle_`` column name."""
        return {
            f"chronicle_{name}": value
            for name, value in self.model_dump(exclude_unset=True).items()
            if name in ("color", "fuzzy_start", "fuzzy_end", "note")
        }


class ContactChronicleAnnotation(ChronicleAnnotation):
    """Chronicle columns of a contact, plus its visibility and meeting date."""

    show_on_chronicle: bool | None = None
    met_date: str | None = None

    def changes(self) -> dict[str, Any]:
        """Provided fields keyed by column name."""
        fields = super().changes()
        provided = self.model_dump(exclude_unset=True)
        for name in ("show_on_chronicle", "met_date"):
            if name in provided:
                fields[name] = provided[name]
        return fields


class SourcePage(ValueObject):
    """Result of fetching a contact's linked page.

    ``status`` is None when the page could not be retrieved at all.
    """

    url: str
    status: int | None = None
    body: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the page was retrieved with a 2xx status."""
        return self.status is not None and 200 <= self.status < 300
