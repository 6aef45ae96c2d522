"""Connection and invite routes."""

import logging
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from nexus.application.usecase.connection import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    GetConnectionsRequest,
    GetConnectionsResponse,
    GetConnectionsUseCase,
    GetPendingInvitesRequest,
    GetPendingInvitesResponse,
    GetPendingInvitesUseCase,
    RedeemInviteRequest,
    RedeemInviteResponse,
    RedeemInviteUseCase,
)
from nexus.domain.error import DomainError
from nexus.domain.service import JWTService
from nexus.interface.api.dependencies import require_user_id
from nexus.interface.error import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/connections", tags=["connections"], route_class=DishkaRoute)


class CreateInviteAPIRequest(BaseModel):
    """API request for creating an invite for one of the user's contacts."""

    contact_id: UUID


class RedeemInviteAPIRequest(BaseModel):
    """API request for entering an invite code."""

    code: str


@router.post(
    "/invites", response_model=CreateInviteResponse, status_code=status.HTTP_201_CREATED
)
async def create_invite(
    request: CreateInviteAPIRequest,
    create_invite_use_case: FromDishka[CreateInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateInviteResponse:
    """Issue an invite code for a contact placeholder.

    Returns the contact's existing pending code if there is one.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the contact is not
            the user's, 409 if no unique code could be generated
    """
    user_id = require_user_id(jwt_service, auth_token)

    try:
        return await create_invite_use_case.execute(
            CreateInviteRequest(inviter_id=user_id, contact_id=request.contact_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/invites", response_model=GetPendingInvitesResponse)
async def get_pending_invites(
    get_pending_invites_use_case: FromDishka[GetPendingInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetPendingInvitesResponse:
    """List the user's invites that nobody has redeemed yet."""
    user_id = require_user_id(jwt_service, auth_token)
    return await get_pending_invites_use_case.execute(
        GetPendingInvitesRequest(user_id=user_id)
    )


@router.post("/redeem", response_model=RedeemInviteResponse)
async def redeem_invite(
    request: RedeemInviteAPIRequest,
    redeem_invite_use_case: FromDishka[RedeemInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> RedeemInviteResponse:
    """Redeem an invite code as the signed-in user.

    A code that cannot be redeemed is not an HTTP error: the response has
    ``success=false`` and a user-facing ``error`` message.

    Example:
        POST /connections/redeem
        {"code": "nexus-7q2k9p"}

        Response:
        {"success": true, "error": null, "outcome": "ok", "connection_id": "..."}
    """
    user_id = require_user_id(jwt_service, auth_token)

    response = await redeem_invite_use_case.execute(
        RedeemInviteRequest(invitee_id=user_id, code=request.code)
    )
    if not response.success:
        logger.info(f"Invite not redeemed by {user_id}: {response.outcome.value}")
    return response


@router.get("", response_model=GetConnectionsResponse)
async def get_connections(
    get_connections_use_case: FromDishka[GetConnectionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetConnectionsResponse:
    """List the user's accepted connections."""
    user_id = require_user_id(jwt_service, auth_token)
    return await get_connections_use_case.execute(
        GetConnectionsRequest(user_id=user_id)
    )
