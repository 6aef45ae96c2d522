"""Chronicle timeline routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from nexus.application.usecase.chronicle import (
    AnnotateContactRequest,
    AnnotateContactUseCase,
    AnnotateWorkEntryRequest,
    AnnotateWorkEntryUseCase,
    ChronicleEntryFields,
    ChroniclePlaceFields,
    DeleteItemRequest,
    DeleteItemUseCase,
    LoadChronicleRequest,
    LoadChronicleResponse,
    LoadChronicleUseCase,
    SaveEntryRequest,
    SaveEntryResponse,
    SaveEntryUseCase,
    SavePlaceRequest,
    SavePlaceResponse,
    SavePlaceUseCase,
    UpdateEntryDatesRequest,
    UpdateEntryDatesUseCase,
)
from nexus.domain.error import DomainError
from nexus.domain.model.chronicle import YEAR_MONTH_PATTERN
from nexus.domain.service import JWTService
from nexus.domain.value import ChronicleAnnotation, ContactChronicleAnnotation
from nexus.interface.api.dependencies import require_user_id
from nexus.interface.error import to_http_exception

router = APIRouter(prefix="/chronicle", tags=["chronicle"], route_class=DishkaRoute)


class EntryDatesAPIRequest(BaseModel):
    """New position of an entry after a drag."""

    start_date: str = Field(pattern=YEAR_MONTH_PATTERN)
    end_date: Optional[str] = Field(default=None, pattern=YEAR_MONTH_PATTERN)


@router.get("", response_model=LoadChronicleResponse)
async def load_chronicle(
    load_chronicle_use_case: FromDishka[LoadChronicleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LoadChronicleResponse:
    """Load entries, places, work entries and chronicle contacts."""
    user_id = require_user_id(jwt_service, auth_token)
    return await load_chronicle_use_case.execute(LoadChronicleRequest(user_id=user_id))


@router.post("/entries", response_model=SaveEntryResponse)
async def save_entry(
    request: ChronicleEntryFields,
    save_entry_use_case: FromDishka[SaveEntryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SaveEntryResponse:
    """Create an entry, or update it when the body carries an ``id``.

    Raises:
        HTTPException: 404 if the entry is not the user's, 400 if invalid
    """
    user_id = require_user_id(jwt_service, auth_token)
    try:
        return await save_entry_use_case.execute(
            SaveEntryRequest(user_id=user_id, entry=request)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/entries/{entry_id}/dates", status_code=status.HTTP_204_NO_CONTENT)
async def update_entry_dates(
    entry_id: UUID,
    request: EntryDatesAPIRequest,
    update_entry_dates_use_case: FromDishka[UpdateEntryDatesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Move or resize an entry."""
    user_id = require_user_id(jwt_service, auth_token)
    try:
        await update_entry_dates_use_case.execute(
            UpdateEntryDatesRequest(
                user_id=user_id,
                entry_id=entry_id,
                start_date=request.start_date,
                end_date=request.end_date,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: UUID,
    delete_item_use_case: FromDishka[DeleteItemUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete one of the user's entries."""
    user_id = require_user_id(jwt_service, auth_token)
    try:
        await delete_item_use_case.execute(
            DeleteItemRequest(user_id=user_id, kind="entry", item_id=entry_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/places", response_model=SavePlaceResponse)
async def save_place(
    request: ChroniclePlaceFields,
    save_place_use_case: FromDishka[SavePlaceUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SavePlaceResponse:
    """Create a place, or write the given fields of the place with ``id``."""
    user_id = require_user_id(jwt_service, auth_token)
    try:
        return await save_place_use_case.execute(
            SavePlaceRequest(user_id=user_id, place=request)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/places/{place_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_place(
    place_id: UUID,
    delete_item_use_case: FromDishka[DeleteItemUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete one of the user's places."""
    user_id = require_user_id(jwt_service, auth_token)
    try:
        await delete_item_use_case.execute(
            DeleteItemRequest(user_id=user_id, kind="place", item_id=place_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/work/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def annotate_work_entry(
    entry_id: UUID,
    request: ChronicleAnnotation,
    annotate_work_entry_use_case: FromDishka[AnnotateWorkEntryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Set the chronicle color, fuzziness or note of a work entry.

    Only the fields present in the body are written.
    """
    user_id = require_user_id(jwt_service, auth_token)
    try:
        await annotate_work_entry_use_case.execute(
            AnnotateWorkEntryRequest(
                user_id=user_id, entry_id=entry_id, annotation=request
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/contacts/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def annotate_contact(
    contact_id: UUID,
    request: ContactChronicleAnnotation,
    annotate_contact_use_case: FromDishka[AnnotateContactUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Place a contact on the chronicle or change how it is drawn.

    Only the fields present in the body are written.
    """
    user_id = require_user_id(jwt_service, auth_token)
    try:
        await annotate_contact_use_case.execute(
            AnnotateContactRequest(
                user_id=user_id, contact_id=contact_id, annotation=request
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
