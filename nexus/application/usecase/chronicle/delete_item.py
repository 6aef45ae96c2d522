"""Delete chronicle item use case."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from nexus.domain.service import ChronicleService
from nexus.domain.value import ChronicleEntryId, ChroniclePlaceId, UserId


class DeleteItemRequest(BaseModel):
    """Delete item request."""

    user_id: str
    kind: Literal["entry", "place"]
    item_id: UUID


class DeleteItemUseCase:
    """Use case for deleting an entry or a place from the chronicle."""

    def __init__(self, chronicle_service: ChronicleService) -> None:
        self.chronicle_service = chronicle_service

    async def execute(self, request: DeleteItemRequest) -> None:
        """Delete the item.

        Raises:
            NotFoundError: If the item is not the user's
        """
        user_id = UserId(UUID(request.user_id))
        if request.kind == "entry":
            await self.chronicle_service.delete_entry(
                user_id, ChronicleEntryId(request.item_id)
            )
        else:
            await self.chronicle_service.delete_place(
                user_id, ChroniclePlaceId(request.item_id)
            )
