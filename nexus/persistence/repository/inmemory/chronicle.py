"""In-memory chronicle repository for testing."""

from datetime import datetime
from typing import Any, Optional

from nexus.domain.model import ChronicleEntry, ChroniclePlace
from nexus.domain.repository import ChronicleRepository
from nexus.domain.value import ChronicleEntryId, ChroniclePlaceId, UserId


class InMemoryChronicleRepository(ChronicleRepository):
    """In-memory implementation of ChronicleRepository for testing."""

    def __init__(self) -> None:
        self._entries: dict[ChronicleEntryId, ChronicleEntry] = {}
        self._places: dict[ChroniclePlaceId, ChroniclePlace] = {}

    async def find_entries(self, user_id: UserId) -> list[ChronicleEntry]:
        """Find a user's entries ordered by start date."""
        return sorted(
            (e for e in self._entries.values() if e.user_id == user_id),
            key=lambda e: e.start_date,
        )

    async def find_entry(
        self, entry_id: ChronicleEntryId, user_id: UserId
    ) -> Optional[ChronicleEntry]:
        """Find one of the user's entries."""
        entry = self._entries.get(entry_id)
        return entry if entry and entry.user_id == user_id else None

    async def save_entry(self, entry: ChronicleEntry) -> ChronicleEntry:
        """Save an entry (create or update)."""
        self._entries[entry.id] = entry
        return entry

    async def update_entry_dates(
        self,
        entry_id: ChronicleEntryId,
        user_id: UserId,
        start_date: str,
        end_date: str | None,
    ) -> bool:
        """Move or resize an entry."""
        entry = await self.find_entry(entry_id, user_id)
        if entry is None:
            return False
        self._entries[entry_id] = entry.model_copy(
            update={
                "start_date": start_date,
                "end_date": end_date,
                "updated_at": datetime.now(),
            }
        )
        return True

    async def delete_entry(self, entry_id: ChronicleEntryId, user_id: UserId) -> bool:
        """Delete an entry."""
        if await self.find_entry(entry_id, user_id) is None:
            return False
        del self._entries[entry_id]
        return True

    async def find_places(self, user_id: UserId) -> list[ChroniclePlace]:
        """Find a user's places ordered by start date."""
        return sorted(
            (p for p in self._places.values() if p.user_id == user_id),
            key=lambda p: p.start_date,
        )

    async def find_place(
        self, place_id: ChroniclePlaceId, user_id: UserId
    ) -> Optional[ChroniclePlace]:
        """Find one of the user's places."""
        place = self._places.get(place_id)
        return place if place and place.user_id == user_id else None

    async def insert_place(self, place: ChroniclePlace) -> ChroniclePlace:
        """Insert a new place."""
        self._places[place.id] = place
        return place

    async def update_place(
        self, place_id: ChroniclePlaceId, user_id: UserId, fields: dict[str, Any]
    ) -> Optional[ChroniclePlace]:
        """Write only the given columns of a place."""
        place = await self.find_place(place_id, user_id)
        if place is None:
            return None
        updated = place.model_copy(update=fields)
        self._places[place_id] = updated
        return updated

    async def delete_place(self, place_id: ChroniclePlaceId, user_id: UserId) -> bool:
        """Delete a place."""
        if await self.find_place(place_id, user_id) is None:
            return False
        del self._places[place_id]
        return True
