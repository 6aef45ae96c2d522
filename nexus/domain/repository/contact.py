"""Contact repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from nexus.domain.model.contact import Contact
from nexus.domain.value import ContactId, UserId


class ContactRepository(ABC):
    """Repository for Contact entity.

    Every lookup is scoped to the owning user where the caller has one.
    """

    @abstractmethod
    async def find_by_id(self, contact_id: ContactId) -> Contact | None:
        """Find a contact by ID.

        Args:
            contact_id: The contact's unique identifier

        Returns:
            The contact if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner_and_linked_profile(
        self, owner_id: UserId, linked_profile_id: UserId
    ) -> Contact | None:
        """Find the owner's card linked to another user's profile.

        Args:
            owner_id: Owner of the card
            linked_profile_id: Profile the card is linked to

        Returns:
            The contact if found, None otherwise
        """
        pass

    @abstractmethod
    async def link_profile(
        self, contact_id: ContactId, linked_profile_id: UserId
    ) -> None:
        """Link an existing card to a user's profile.

        Args:
            contact_id: Card to link
            linked_profile_id: Profile to link it to
        """
        pass

    @abstractmethod
    async def insert_if_absent(self, contact: Contact) -> Contact:
        """Insert a linked card unless one exists for its natural key.

        The natural key is ``(owner_id, linked_profile_id)``. When a card
        already exists for it, nothing is written and that card is returned.

        Args:
            contact: Card to insert, with ``linked_profile_id`` set

        Returns:
            The card stored under the natural key
        """
        pass

    @abstractmethod
    async def save(self, contact: Contact) -> Contact:
        """Save a contact (create or update)."""
        pass

    @abstractmethod
    async def find_on_chronicle(self, owner_id: UserId) -> list[Contact]:
        """Find the owner's contacts flagged for the chronicle.

        Args:
            owner_id: Owner of the cards

        Returns:
            Contacts with ``show_on_chronicle`` set, ordered by full name
        """
        pass

    @abstractmethod
    async def update_chronicle(
        self, contact_id: ContactId, owner_id: UserId, fields: dict[str, Any]
    ) -> bool:
        """Update chronicle columns of one of the owner's contacts.

        Args:
            contact_id: Card to update
            owner_id: Expected owner
            fields: Column values to write

        Returns:
            True if a row was updated, False if no such card for this owner
        """
        pass
