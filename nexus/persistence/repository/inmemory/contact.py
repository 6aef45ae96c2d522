"""In-memory contact repository for testing."""

from datetime import datetime
from typing import Any, Optional

from nexus.domain.model import Contact
from nexus.domain.repository import ContactRepository
from nexus.domain.value import ContactId, UserId


class InMemoryContactRepository(ContactRepository):
    """In-memory implementation of ContactRepository for testing."""

    def __init__(self) -> None:
        self._contacts: dict[ContactId, Contact] = {}

    async def find_by_id(self, contact_id: ContactId) -> Optional[Contact]:
        """Find a contact by ID."""
        return self._contacts.get(contact_id)

    async def find_by_owner_and_linked_profile(
        self, owner_id: UserId, linked_profile_id: UserId
    ) -> Optional[Contact]:
        """Find the owner's card linked to a profile."""
        for contact in self._contacts.values():
            if (
                contact.owner_id == owner_id
                and contact.linked_profile_id == linked_profile_id
            ):
                return contact
        return None

    async def link_profile(
        self, contact_id: ContactId, linked_profile_id: UserId
    ) -> None:
        """Link an existing card to a profile."""
        contact = self._contacts.get(contact_id)
        if contact:
            self._contacts[contact_id] = contact.model_copy(
                update={"linked_profile_id": linked_profile_id}
            )

    async def insert_if_absent(self, contact: Contact) -> Contact:
        """Insert a linked card unless its natural key is taken."""
        existing = await self.find_by_owner_and_linked_profile(
            contact.owner_id, contact.linked_profile_id
        )
        if existing:
            return existing
        self._contacts[contact.id] = contact
        return contact

    async def save(self, contact: Contact) -> Contact:
        """Save a contact (create or update)."""
        self._contacts[contact.id] = contact
        return contact

    async def find_on_chronicle(self, owner_id: UserId) -> list[Contact]:
        """Find the owner's chronicle contacts ordered by name."""
        return sorted(
            (
                c
                for c in self._contacts.values()
                if c.owner_id == owner_id and c.show_on_chronicle
            ),
            key=lambda c: c.full_name,
        )

    async def update_chronicle(
        self, contact_id: ContactId, owner_id: UserId, fields: dict[str, Any]
    ) -> bool:
        """Update chronicle columns of one of the owner's contacts."""
        contact = self._contacts.get(contact_id)
        if contact is None or contact.owner_id != owner_id:
            return False
        self._contacts[contact_id] = contact.model_copy(
            update={**fields, "updated_at": datetime.now()}
        )
        return True

    def all(self) -> list[Contact]:
        """All stored contacts, for test assertions."""
        return list(self._contacts.values())
