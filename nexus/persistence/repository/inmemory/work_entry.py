"""In-memory work entry repository for testing."""

from typing import Any

from nexus.domain.model import WorkEntry
from nexus.domain.repository import WorkEntryRepository
from nexus.domain.value import UserId, WorkEntryId


class InMemoryWorkEntryRepository(WorkEntryRepository):
    """In-memory implementation of WorkEntryRepository for testing."""

    def __init__(self) -> None:
        self._entries: dict[WorkEntryId, WorkEntry] = {}

    def add(self, entry: WorkEntry) -> WorkEntry:
        """Seed a work entry; they are edited elsewhere in the product."""
        self._entries[entry.id] = entry
        return entry

    async def find_by_user(self, user_id: UserId) -> list[WorkEntry]:
        """Find a user's work entries ordered by start date."""
        return sorted(
            (e for e in self._entries.values() if e.user_id == user_id),
            key=lambda e: e.start_date,
        )

    async def update_chronicle(
        self, entry_id: WorkEntryId, user_id: UserId, fields: dict[str, Any]
    ) -> bool:
        """Update chronicle columns of one of the user's work entries."""
        entry = self._entries.get(entry_id)
        if entry is None or entry.user_id != user_id:
            return False
        self._entries[entry_id] = entry.model_copy(update=fields)
        return True
