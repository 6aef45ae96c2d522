"""Test configuration and fixtures."""

from datetime import datetime
from uuid import UUID, uuid4

from nexus.domain.model import Contact, Profile
from nexus.domain.repository import ContactRepository, ProfileRepository
from nexus.domain.value import ContactId, UserId


async def create_profile(
    profile_repository: ProfileRepository,
    full_name: str = "Test User",
    user_id: UUID | None = None,
    **fields,
) -> Profile:
    """Helper to store a profile for a test user.

    Args:
        profile_repository: Repository to save into
        full_name: Display name; the email is derived from it
        user_id: Fixed id, or a fresh one
        **fields: Any other profile fields

    Returns:
        Saved profile
    """
    now = datetime.now()
    local_part = full_name.lower().replace(" ", ".")
    profile = Profile(
        id=UserId(user_id or uuid4()),
        email=fields.pop("email", f"{local_part}@example.com"),
        full_name=full_name,
        created_at=now,
        updated_at=now,
        **fields,
    )
    return await profile_repository.save(profile)


async def create_contact(
    contact_repository: ContactRepository,
    owner_id: UserId,
    full_name: str = "Placeholder Contact",
    **fields,
) -> Contact:
    """Helper to store an unlinked contact card for ``owner_id``."""
    now = datetime.now()
    contact = Contact(
        id=ContactId(uuid4()),
        owner_id=owner_id,
        full_name=full_name,
        created_at=now,
        updated_at=now,
        **fields,
    )
    return await contact_repository.save(contact)
