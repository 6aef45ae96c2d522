"""Chronicle domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from nexus.domain.error import NotFoundError, ValidationError
from nexus.domain.model import ChronicleEntry, ChroniclePlace, Contact, WorkEntry
from nexus.domain.repository import (
    ChronicleRepository,
    ContactRepository,
    WorkEntryRepository,
)
from nexus.domain.value import (
    ChronicleAnnotation,
    ChronicleEntryId,
    ChroniclePlaceId,
    ContactChronicleAnnotation,
    ContactId,
    UserId,
    WorkEntryId,
)

from .base import Service


@dataclass
class ChronicleData:
    """Everything drawn on a user's chronicle."""

    entries: list[ChronicleEntry]
    places: list[ChroniclePlace]
    work_entries: list[WorkEntry]
    contacts: list[Contact]


def _validated(model: type, data: dict[str, Any]):
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(str(e)) from e


class ChronicleService(Service):
    """Domain service for the chronicle timeline.

    All operations are scoped to the calling user. A row belonging to
    someone else is reported as not found.
    """

    def __init__(
        self,
        chronicle_repository: ChronicleRepository,
        work_entry_repository: WorkEntryRepository,
        contact_repository: ContactRepository,
    ) -> None:
        """Initialize chronicle service.

        Args:
            chronicle_repository: Chronicle entry and place repository
            work_entry_repository: Work entry repository
            contact_repository: Contact repository
        """
        self.chronicle_repository = chronicle_repository
        self.work_entry_repository = work_entry_repository
        self.contact_repository = contact_repository

    async def load(self, user_id: UserId) -> ChronicleData:
        """Load all chronicle collections for a user.

        Args:
            user_id: Owner of the chronicle

        Returns:
            Entries, places and work entries by start date, and chronicle
            contacts by name
        """
        with logfire.span("chronicle_service.load", user_id=str(user_id)):
            data = ChronicleData(
                entries=await self.chronicle_repository.find_entries(user_id),
                places=await self.chronicle_repository.find_places(user_id),
                work_entries=await self.work_entry_repository.find_by_user(user_id),
                contacts=await self.contact_repository.find_on_chronicle(user_id),
            )
            logfire.info(
                "Chronicle loaded",
                user_id=str(user_id),
                entries=len(data.entries),
                places=len(data.places),
                work_entries=len(data.work_entries),
                contacts=len(data.contacts),
            )
            return data

    async def upsert_entry(
        self,
        user_id: UserId,
        fields: dict[str, Any],
        entry_id: ChronicleEntryId | None = None,
    ) -> ChronicleEntry:
        """Create an entry, or update one of the user's entries.

        Args:
            user_id: Owner
            fields: Entry fields to write
            entry_id: Entry to update; None creates a new one

        Returns:
            The saved entry

        Raises:
            NotFoundError: If ``entry_id`` is not one of the user's entries
            ValidationError: If the resulting entry is invalid
        """
        with logfire.span(
            "chronicle_service.upsert_entry",
            user_id=str(user_id),
            entry_id=str(entry_id) if entry_id else None,
        ):
            now = datetime.now()
            if entry_id is None:
                entry = _validated(
                    ChronicleEntry,
                    {
                        **fields,
                        "id": ChronicleEntryId(uuid4()),
                        "user_id": user_id,
                        "created_at": now,
                        "updated_at": now,
                    },
                )
            else:
                existing = await self.chronicle_repository.find_entry(entry_id, user_id)
                if existing is None:
                    raise NotFoundError("Chronicle entry", str(entry_id))
                entry = _validated(
                    ChronicleEntry,
                    {**existing.model_dump(), **fields, "updated_at": now},
                )

            saved = await self.chronicle_repository.save_entry(entry)
            logfire.info("Chronicle entry saved", entry_id=str(saved.id))
            return saved

    async def update_entry_dates(
        self,
        user_id: UserId,
        entry_id: ChronicleEntryId,
        start_date: str,
        end_date: str | None,
    ) -> None:
        """Move or resize an entry after a drag on the timeline.

        Raises:
            NotFoundError: If the entry is not one of the user's entries
        """
        with logfire.span(
            "chronicle_service.update_entry_dates",
            user_id=str(user_id),
            entry_id=str(entry_id),
        ):
            updated = await self.chronicle_repository.update_entry_dates(
                entry_id, user_id, start_date, end_date
            )
            if not updated:
                raise NotFoundError("Chronicle entry", str(entry_id))

    async def delete_entry(self, user_id: UserId, entry_id: ChronicleEntryId) -> None:
        """Delete one of the user's entries.

        Raises:
            NotFoundError: If the entry is not one of the user's entries
        """
        with logfire.span(
            "chronicle_service.delete_entry",
            user_id=str(user_id),
            entry_id=str(entry_id),
        ):
            if not await self.chronicle_repository.delete_entry(entry_id, user_id):
                raise NotFoundError("Chronicle entry", str(entry_id))
            logfire.info("Chronicle entry deleted", entry_id=str(entry_id))

    async def upsert_place(
        self,
        user_id: UserId,
        fields: dict[str, Any],
        place_id: ChroniclePlaceId | None = None,
    ) -> ChroniclePlace:
        """Create a place, or write the given fields of an existing one.

        Args:
            user_id: Owner
            fields: Only the place fields being set
            place_id: Place to update; None creates a new one

        Returns:
            The saved place

        Raises:
            NotFoundError: If ``place_id`` is not one of the user's places
            ValidationError: If the resulting place is invalid
        """
        with logfire.span(
            "chronicle_service.upsert_place",
            user_id=str(user_id),
            place_id=str(place_id) if place_id else None,
        ):
            now = datetime.now()
            if place_id is None:
                place = _validated(
                    ChroniclePlace,
                    {
                        **fields,
                        "id": ChroniclePlaceId(uuid4()),
                        "user_id": user_id,
                        "created_at": now,
                        "updated_at": now,
                    },
                )
                saved = await self.chronicle_repository.insert_place(place)
                logfire.info("Chronicle place created", place_id=str(saved.id))
                return saved

            existing = await self.chronicle_repository.find_place(place_id, user_id)
            if existing is None:
                raise NotFoundError("Chronicle place", str(place_id))
            # Validate the merged result before writing the partial update
            _validated(ChroniclePlace, {**existing.model_dump(), **fields})

            updated = await self.chronicle_repository.update_place(
                place_id, user_id, {**fields, "updated_at": now}
            )
            if updated is None:
                raise NotFoundError("Chronicle place", str(place_id))
            logfire.info("Chronicle place updated", place_id=str(place_id))
            return updated

    async def delete_place(self, user_id: UserId, place_id: ChroniclePlaceId) -> None:
        """Delete one of the user's places.

        Raises:
            NotFoundError: If the place is not one of the user's places
        """
        with logfire.span(
            "chronicle_service.delete_place",
            user_id=str(user_id),
            place_id=str(place_id),
        ):
            if not await self.chronicle_repository.delete_place(place_id, user_id):
                raise NotFoundError("Chronicle place", str(place_id))
            logfire.info("Chronicle place deleted", place_id=str(place_id))

    async def update_work_entry_chronicle(
        self,
        user_id: UserId,
        entry_id: WorkEntryId,
        annotation: ChronicleAnnotation,
    ) -> None:
        """Write the provided chronicle columns of a work entry.

        Raises:
            ValidationError: If no chronicle field was provided
            NotFoundError: If the work entry is not the user's
        """
        with logfire.span(
            "chronicle_service.update_work_entry_chronicle",
            user_id=str(user_id),
            entry_id=str(entry_id),
        ):
            fields = annotation.changes()
            if not fields:
                raise ValidationError("No chronicle fields to update")
            if not await self.work_entry_repository.update_chronicle(
                entry_id, user_id, fields
            ):
                raise NotFoundError("Work entry", str(entry_id))

    async def update_contact_chronicle(
        self,
        user_id: UserId,
        contact_id: ContactId,
        annotation: ContactChronicleAnnotation,
    ) -> None:
        """Write the provided chronicle columns of a contact.

        Raises:
            ValidationError: If no chronicle field was provided
            NotFoundError: If the contact is not the user's
        """
        with logfire.span(
            "chronicle_service.update_contact_chronicle",
            user_id=str(user_id),
            contact_id=str(contact_id),
        ):
            fields = annotation.changes()
            if not fields:
                raise ValidationError("No chronicle fields to update")
            if not await self.contact_repository.update_chronicle(
                contact_id, user_id, fields
            ):
                raise NotFoundError("Contact", str(contact_id))
