"""Save chronicle place use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from nexus.domain.model import ChroniclePlace
from nexus.domain.service import ChronicleService
from nexus.domain.value import ChroniclePlaceId, UserId


class ChroniclePlaceFields(BaseModel):
    """Writable fields of a place. All optional so updates can be partial."""

    id: Optional[UUID] = None
    title: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    color: Optional[str] = None
    fuzzy_start: Optional[bool] = None
    fuzzy_end: Optional[bool] = None
    note: Optional[str] = None
    show_on_resume: Optional[bool] = None


class SavePlaceRequest(BaseModel):
    """Save place request."""

    user_id: str
    place: ChroniclePlaceFields


class SavePlaceResponse(BaseModel):
    """Save place response."""

    place: ChroniclePlace


class SavePlaceUseCase:
    """Use case for creating a place or writing some of its fields."""

    def __init__(self, chronicle_service: ChronicleService) -> None:
        """Initialize save place use case.

        Args:
            chronicle_service: Chronicle domain service
        """
        self.chronicle_service = chronicle_service

    async def execute(self, request: SavePlaceRequest) -> SavePlaceResponse:
        """Create or partially update a place.

        Raises:
            NotFoundError: If the place id is not one of the user's places
            ValidationError: If the resulting place is invalid
        """
        fields = request.place.model_dump(exclude_unset=True, exclude={"id"})
        if request.place.id is None:
            # Unset columns fall back to the place defaults
            fields = {k: v for k, v in fields.items() if v is not None}
        place_id = ChroniclePlaceId(request.place.id) if request.place.id else None

        place = await self.chronicle_service.upsert_place(
            UserId(UUID(request.user_id)), fields, place_id
        )
        return SavePlaceResponse(place=place)
