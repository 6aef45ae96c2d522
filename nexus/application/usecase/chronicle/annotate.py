"""Chronicle annotation use cases for work entries and contacts."""

from uuid import UUID

from pydantic import BaseModel

from nexus.domain.service import ChronicleService
from nexus.domain.value import (
    ChronicleAnnotation,
    ContactChronicleAnnotation,
    ContactId,
    UserId,
    WorkEntryId,
)


class AnnotateWorkEntryRequest(BaseModel):
    """Annotate work entry request."""

    user_id: str
    entry_id: UUID
    annotation: ChronicleAnnotation


class AnnotateContactRequest(BaseModel):
    """Annotate contact request."""

    user_id: str
    contact_id: UUID
    annotation: ContactChronicleAnnotation


class AnnotateWorkEntryUseCase:
    """Use case for setting how a work entry is drawn on the chronicle."""

    def __init__(self, chronicle_service: ChronicleService) -> None:
        self.chronicle_service = chronicle_service

    async def execute(self, request: AnnotateWorkEntryRequest) -> None:
        """Write the provided chronicle columns.

        Raises:
            ValidationError: If the annotation is empty
            NotFoundError: If the work entry is not the user's
        """
        await self.chronicle_service.update_work_entry_chronicle(
            UserId(UUID(request.user_id)),
            WorkEntryId(request.entry_id),
            request.annotation,
        )


class AnnotateContactUseCase:
    """Use case for placing a contact on the chronicle."""

    def __init__(self, chronicle_service: ChronicleService) -> None:
        self.chronicle_service = chronicle_service

    async def execute(self, request: AnnotateContactRequest) -> None:
        await self.chronicle_service.update_contact_chronicle(
            UserId(UUID(request.user_id)),
            ContactId(request.contact_id),
            request.annotation,
        )
