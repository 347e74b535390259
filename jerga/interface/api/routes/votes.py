"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel

from jerga.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetVoteRequest,
    GetVoteResponse,
    GetVoteUseCase,
)
from jerga.domain.service import JWTService
from jerga.domain.value import VotableType
from jerga.interface.api.auth import current_user_id

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote."""

    votable_type: VotableType
    votable_id: UUID
    vote_type: str


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CastVoteResponse:
    """Vote on a definition, comment or dicho.

    Requires authentication. Repeating the same vote retracts it, voting the
    other way flips it.

    Args:
        request: Target and direction
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header, used when no cookie is sent

    Returns:
        The action taken, the caller's resulting vote and the new counters
    """
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            vote_type=request.vote_type,
            user_id=user_id,
        )
    )


@router.get("", response_model=GetVoteResponse)
async def get_vote(
    votable_type: VotableType,
    votable_id: UUID,
    get_vote_use_case: FromDishka[GetVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetVoteResponse:
    """The caller's current vote on an item, if any."""
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await get_vote_use_case.execute(
        GetVoteRequest(
            votable_type=votable_type, votable_id=votable_id, user_id=user_id
        )
    )
