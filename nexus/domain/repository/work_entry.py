"""Work entry repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from nexus.domain.model.work_entry import WorkEntry
from nexus.domain.value import UserId, WorkEntryId


class WorkEntryRepository(ABC):
    """Repository for WorkEntry entity."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> list[WorkEntry]:
        """Find a user's work entries ordered by start date."""
        pass

    @abstractmethod
    async def update_chronicle(
        self, entry_id: WorkEntryId, user_id: UserId, fields: dict[str, Any]
    ) -> bool:
        """Update chronicle columns of one of the user's work entries.

        Args:
            entry_id: Entry to update
            user_id: Expected owner
            fields: Column values to write

        Returns:
            True if a row was updated, False if no such entry for this user
        """
        pass
