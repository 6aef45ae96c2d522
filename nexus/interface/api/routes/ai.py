"""AI drafting routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from fastapi.responses import JSONResponse

from nexus.adapter.error import LanguageModelError
from nexus.application.usecase.insight import (
    GenerateSynergyRequest,
    GenerateSynergyResponse,
    GenerateSynergyUseCase,
    SummarizeContactRequest,
    SummarizeContactResponse,
    SummarizeContactUseCase,
)
from nexus.domain.service import JWTService
from nexus.interface.api.dependencies import require_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["ai"], route_class=DishkaRoute)


def _model_error(e: LanguageModelError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(e)},
    )


@router.post("/synergy", response_model=GenerateSynergyResponse)
async def generate_synergy(
    request: GenerateSynergyRequest,
    generate_synergy_use_case: FromDishka[GenerateSynergyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """Draft how the user and a contact could help each other.

    Example:
        POST /api/ai/synergy
        {"myProfile": "...", "contactInfo": "...", "myWork": "..."}

        Response:
        {"helpThem": "...", "helpMe": "...", "commonGround": "..."}

    Language model failures return 500 with ``{"error": message}``.
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await generate_synergy_use_case.execute(request)
    except LanguageModelError as e:
        logger.error(f"Synergy generation failed for {user_id}: {e}")
        return _model_error(e)


@router.post("/summarize", response_model=SummarizeContactResponse)
async def summarize_contact(
    request: SummarizeContactRequest,
    summarize_contact_use_case: FromDishka[SummarizeContactUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
):
    """Draft a summary and one-liner for a contact from their linked pages.

    Example:
        POST /api/ai/summarize
        {"contactInfo": "...", "notes": "...", "urls": ["https://..."]}

        Response:
        {"summary": "...", "oneliner": "..."}
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await summarize_contact_use_case.execute(request)
    except LanguageModelError as e:
        logger.error(f"Contact summary failed for {user_id}: {e}")
        return _model_error(e)
