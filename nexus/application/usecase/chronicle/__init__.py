"""Chronicle use cases."""

from nexus.application.usecase.chronicle.annotate import (
    AnnotateContactRequest,
    AnnotateContactUseCase,
    AnnotateWorkEntryRequest,
    AnnotateWorkEntryUseCase,
)
from nexus.application.usecase.chronicle.delete_item import (
    DeleteItemRequest,
    DeleteItemUseCase,
)
from nexus.application.usecase.chronicle.load_chronicle import (
    LoadChronicleRequest,
    LoadChronicleResponse,
    LoadChronicleUseCase,
)
from nexus.application.usecase.chronicle.save_entry import (
    ChronicleEntryFields,
    SaveEntryRequest,
    SaveEntryResponse,
    SaveEntryUseCase,
)
from nexus.application.usecase.chronicle.save_place import (
    ChroniclePlaceFields,
    SavePlaceRequest,
    SavePlaceResponse,
    SavePlaceUseCase,
)
from nexus.application.usecase.chronicle.update_entry_dates import (
    UpdateEntryDatesRequest,
    UpdateEntryDatesUseCase,
)

__all__ = [
    "AnnotateContactRequest",
    "AnnotateContactUseCase",
    "AnnotateWorkEntryRequest",
    "AnnotateWorkEntryUseCase",
    "ChronicleEntryFields",
    "ChroniclePlaceFields",
    "DeleteItemRequest",
    "DeleteItemUseCase",
    "LoadChronicleRequest",
    "LoadChronicleResponse",
    "LoadChronicleUseCase",
    "SaveEntryRequest",
    "SaveEntryResponse",
    "SaveEntryUseCase",
    "SavePlaceRequest",
    "SavePlaceResponse",
    "SavePlaceUseCase",
    "UpdateEntryDatesRequest",
    "UpdateEntryDatesUseCase",
]
