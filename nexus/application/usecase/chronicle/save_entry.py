"""Save chronicle entry use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from nexus.domain.model import ChronicleEntry
from nexus.domain.service import ChronicleService
from nexus.domain.value import ChronicleEntryId, UserId


class ChronicleEntryFields(BaseModel):
    """Writable fields of a chronicle entry.

    A request with ``id`` updates that entry; without one it creates a new
    entry.
    """

    id: Optional[UUID] = None
    type: str
    title: str
    description: Optional[str] = None
    start_date: str
    end_date: Optional[str] = None
    canvas_col: str
    color: str = "#888888"
    fuzzy_start: bool = False
    fuzzy_end: bool = False
    note: Optional[str] = None
    show_on_resume: bool = False


class SaveEntryRequest(BaseModel):
    """Save entry request."""

    user_id: str
    entry: ChronicleEntryFields


class SaveEntryResponse(BaseModel):
    """Save entry response."""

    entry: ChronicleEntry


class SaveEntryUseCase:
    """Use case for creating or updating a chronicle entry."""

    def __init__(self, chronicle_service: ChronicleService) -> None:
        """Initialize save entry use case.

        Args:
            chronicle_service: Chronicle domain service
        """
        self.chronicle_service = chronicle_service

    async def execute(self, request: SaveEntryRequest) -> SaveEntryResponse:
        """Create or update the entry.

        Only fields present in the request are written on update.

        Raises:
            NotFoundError: If the entry id is not one of the user's entries
            ValidationError: If the resulting entry is invalid
        """
        fields = request.entry.model_dump(exclude_unset=True, exclude={"id"})
        entry_id = ChronicleEntryId(request.entry.id) if request.entry.id else None
        if entry_id is None:
            # New entries get the defaults for anything left unset
            fields = request.entry.model_dump(exclude={"id"})

        entry = await self.chronicle_service.upsert_entry(
            UserId(UUID(request.user_id)), fields, entry_id
        )
        logfire.info("Chronicle entry stored", entry_id=str(entry.id))
        return SaveEntryResponse(entry=entry)
