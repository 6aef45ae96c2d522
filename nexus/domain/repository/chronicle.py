"""Chronicle repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from nexus.domain.model.chronicle import ChronicleEntry, ChroniclePlace
from nexus.domain.value import ChronicleEntryId, ChroniclePlaceId, UserId


class ChronicleRepository(ABC):
    """Repository for chronicle entries and places.

    Every operation is scoped to the owning user; rows belonging to anyone
    else behave as if they did not exist.
    """

    @abstractmethod
    async def find_entries(self, user_id: UserId) -> list[ChronicleEntry]:
        """Find a user's entries ordered by start date."""
        pass

    @abstractmethod
    async def find_entry(
        self, entry_id: ChronicleEntryId, user_id: UserId
    ) -> ChronicleEntry | None:
        """Find one of the user's entries."""
        pass

    @abstractmethod
    async def save_entry(self, entry: ChronicleEntry) -> ChronicleEntry:
        """Save an entry (create or update).

        Args:
            entry: The entry to save

        Returns:
            The saved entry
        """
        pass

    @abstractmethod
    async def update_entry_dates(
        self,
        entry_id: ChronicleEntryId,
        user_id: UserId,
        start_date: str,
        end_date: str | None,
    ) -> bool:
        """Move or resize an entry.

        Returns:
            True if a row was updated
        """
        pass

    @abstractmethod
    async def delete_entry(self, entry_id: ChronicleEntryId, user_id: UserId) -> bool:
        """Delete an entry.

        Returns:
            True if a row was deleted
        """
        pass

    @abstractmethod
    async def find_places(self, user_id: UserId) -> list[ChroniclePlace]:
        """Find a user's places ordered by start date."""
        pass

    @abstractmethod
    async def find_place(
        self, place_id: ChroniclePlaceId, user_id: UserId
    ) -> ChroniclePlace | None:
        """Find one of the user's places."""
        pass

    @abstractmethod
    async def insert_place(self, place: ChroniclePlace) -> ChroniclePlace:
        """Insert a new place."""
        pass

    @abstractmethod
    async def update_place(
        self, place_id: ChroniclePlaceId, user_id: UserId, fields: dict[str, Any]
    ) -> ChroniclePlace | None:
        """Write only the given columns of a place.

        Returns:
            The updated place, or None if no such place for this user
        """
        pass

    @abstractmethod
    async def delete_place(self, place_id: ChroniclePlaceId, user_id: UserId) -> bool:
        """Delete a place.

        Returns:
            True if a row was deleted
        """
        pass
