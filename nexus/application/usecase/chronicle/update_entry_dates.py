"""Update chronicle entry dates use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from nexus.domain.model.chronicle import YEAR_MONTH_PATTERN
from nexus.domain.service import ChronicleService
from nexus.domain.value import ChronicleEntryId, UserId


class UpdateEntryDatesRequest(BaseModel):
    """Update entry dates request."""

    user_id: str
    entry_id: UUID
    start_date: str = Field(pattern=YEAR_MONTH_PATTERN)
    end_date: Optional[str] = Field(default=None, pattern=YEAR_MONTH_PATTERN)


class UpdateEntryDatesUseCase:
    """Use case for moving an entry on the timeline."""

    def __init__(self, chronicle_service: ChronicleService) -> None:
        self.chronicle_service = chronicle_service

    async def execute(self, request: UpdateEntryDatesRequest) -> None:
        await self.chronicle_service.update_entry_dates(
            UserId(UUID(request.user_id)),
            ChronicleEntryId(request.entry_id),
            request.start_date,
            request.end_date,
        )
