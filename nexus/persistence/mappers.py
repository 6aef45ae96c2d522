"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through an ORM.
"""

from typing import Any, Dict
from uuid import UUID

from nexus.domain.model import (
    ChronicleEntry,
    ChroniclePlace,
    Connection,
    Contact,
    Profile,
    WorkEntry,
)
from nexus.domain.value import (
    ChronicleEntryId,
    ChroniclePlaceId,
    ConnectionId,
    ConnectionStatus,
    ContactId,
    InviteCode,
    UserId,
    WorkEntryId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        full_name=row["full_name"],
        slug=row.get("slug"),
        avatar_url=row.get("avatar_url"),
        location=row.get("location"),
        bio=row.get("bio"),
        headline=row.get("headline"),
        website=row.get("website"),
        is_public=row.get("is_public", False),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return profile.model_dump()


def row_to_contact(row: Dict[str, Any]) -> Contact:
    """Convert database row to Contact domain model.

    Args:
        row: Database row as dict

    Returns:
        Contact domain model
    """
    linked = _optional_uuid(row.get("linked_profile_id"))
    return Contact(
        id=ContactId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        linked_profile_id=UserId(linked) if linked else None,
        full_name=row["full_name"],
        email=row.get("email"),
        avatar_url=row.get("avatar_url"),
        location=row.get("location"),
        bio=row.get("bio"),
        website=row.get("website"),
        company=row.get("company"),
        role=row.get("role"),
        relationship_type=row.get("relationship_type"),
        chronicle_color=row.get("chronicle_color"),
        chronicle_fuzzy_start=row.get("chronicle_fuzzy_start", False),
        chronicle_fuzzy_end=row.get("chronicle_fuzzy_end", False),
        chronicle_note=row.get("chronicle_note"),
        show_on_chronicle=row.get("show_on_chronicle", False),
        met_date=row.get("met_date"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def contact_to_dict(contact: Contact) -> Dict[str, Any]:
    """Convert Contact domain model to database dict."""
    return contact.model_dump()


def row_to_connection(row: Dict[str, Any]) -> Connection:
    """Convert database row to Connection domain model.

    Args:
        row: Database row as dict

    Returns:
        Connection domain model
    """
    invitee = _optional_uuid(row.get("invitee_id"))
    contact = _optional_uuid(row.get("contact_id"))
    return Connection(
        id=ConnectionId(_uuid(row["id"])),
        invite_code=InviteCode(row["invite_code"]),
        inviter_id=UserId(_uuid(row["inviter_id"])),
        invitee_id=UserId(invitee) if invitee else None,
        contact_id=ContactId(contact) if contact else None,
        status=ConnectionStatus(row["status"]),
        created_at=row["created_at"],
        accepted_at=row.get("accepted_at"),
    )


def connection_to_dict(connection: Connection) -> Dict[str, Any]:
    """Convert Connection domain model to database dict.

    InviteCode dumps to its plain string; the status is stored by value.
    """
    data = connection.model_dump()
    data["status"] = connection.status.value
    return data


def row_to_work_entry(row: Dict[str, Any]) -> WorkEntry:
    """Convert database row to WorkEntry domain model."""
    return WorkEntry(
        id=WorkEntryId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        title=row["title"],
        company=row["company"],
        start_date=row["start_date"],
        end_date=row.get("end_date"),
        is_current=row.get("is_current", False),
        location=row.get("location"),
        description=row.get("description"),
        chronicle_color=row.get("chronicle_color"),
        chronicle_fuzzy_start=row.get("chronicle_fuzzy_start", False),
        chronicle_fuzzy_end=row.get("chronicle_fuzzy_end", False),
        chronicle_note=row.get("chronicle_note"),
        created_at=row["created_at"],
    )


def row_to_chronicle_entry(row: Dict[str, Any]) -> ChronicleEntry:
    """Convert database row to ChronicleEntry domain model."""
    return ChronicleEntry(
        id=ChronicleEntryId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        type=row["type"],
        title=row["title"],
        description=row.get("description"),
        start_date=row["start_date"],
        end_date=row.get("end_date"),
        canvas_col=row["canvas_col"],
        color=row["color"],
        fuzzy_start=row.get("fuzzy_start", False),
        fuzzy_end=row.get("fuzzy_end", False),
        note=row.get("note"),
        show_on_resume=row.get("show_on_resume", False),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def chronicle_entry_to_dict(entry: ChronicleEntry) -> Dict[str, Any]:
    """Convert ChronicleEntry domain model to database dict."""
    return entry.model_dump()


def row_to_chronicle_place(row: Dict[str, Any]) -> ChroniclePlace:
    """Convert database row to ChroniclePlace domain model."""
    return ChroniclePlace(
        id=ChroniclePlaceId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        title=row["title"],
        start_date=row["start_date"],
        end_date=row.get("end_date"),
        color=row["color"],
        fuzzy_start=row.get("fuzzy_start", False),
        fuzzy_end=row.get("fuzzy_end", False),
        note=row.get("note"),
        show_on_resume=row.get("show_on_resume", False),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def chronicle_place_to_dict(place: ChroniclePlace) -> Dict[str, Any]:
    """Convert ChroniclePlace domain model to database dict."""
    return place.model_dump()
