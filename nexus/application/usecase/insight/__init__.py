"""Insight use cases."""

from nexus.application.usecase.insight.generate_synergy import (
    GenerateSynergyRequest,
    GenerateSynergyResponse,
    GenerateSynergyUseCase,
)
from nexus.application.usecase.insight.summarize_contact import (
    SummarizeContactRequest,
    SummarizeContactResponse,
    SummarizeContactUseCase,
)

__all__ = [
    "GenerateSynergyRequest",
    "GenerateSynergyResponse",
    "GenerateSynergyUseCase",
    "SummarizeContactRequest",
    "SummarizeContactResponse",
    "SummarizeContactUseCase",
]
