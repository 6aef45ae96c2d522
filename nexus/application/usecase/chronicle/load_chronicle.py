"""Load chronicle use case."""

from uuid import UUID

from pydantic import BaseModel

from nexus.domain.model import ChronicleEntry, ChroniclePlace, Contact, WorkEntry
from nexus.domain.service import ChronicleService
from nexus.domain.value import UserId


class LoadChronicleRequest(BaseModel):
    """Load chronicle request."""

    user_id: str


class LoadChronicleResponse(BaseModel):
    """Everything drawn on the user's timeline."""

    entries: list[ChronicleEntry]
    places: list[ChroniclePlace]
    work_entries: list[WorkEntry]
    contacts: list[Contact]


class LoadChronicleUseCase:
    """Use case for loading a user's chronicle."""

    def __init__(self, chronicle_service: ChronicleService) -> None:
        self.chronicle_service = chronicle_service

    async def execute(self, request: LoadChronicleRequest) -> LoadChronicleResponse:
        """Load the four chronicle collections in one read."""
        data = await self.chronicle_service.load(UserId(UUID(request.user_id)))
        return LoadChronicleResponse(
            entries=data.entries,
            places=data.places,
            work_entries=data.work_entries,
            contacts=data.contacts,
        )
