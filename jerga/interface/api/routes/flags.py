"""Flag routes: reporting content and moderator review."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from jerga.application.usecase.flag import (
    CreateFlagRequest,
    CreateFlagUseCase,
    FlagItem,
    ListFlagsRequest,
    ListFlagsResponse,
    ListFlagsUseCase,
    ReviewFlagRequest,
    ReviewFlagUseCase,
)
from jerga.domain.service import JWTService
from jerga.domain.value import FlagReason, FlagStatus, FlagTargetType
from jerga.interface.api.auth import current_user_id

router = APIRouter(prefix="/flags", tags=["flags"], route_class=DishkaRoute)


class CreateFlagAPIRequest(BaseModel):
    """API request for reporting content."""

    target_type: FlagTargetType
    target_id: UUID
    reason: FlagReason
    custom_reason: str | None = Field(default=None, max_length=500)


class ReviewFlagAPIRequest(BaseModel):
    """API request for a moderator's decision on a flag."""

    status: FlagStatus
    moderator_notes: str | None = Field(default=None, max_length=1000)


@router.post("", response_model=FlagItem, status_code=status.HTTP_201_CREATED)
async def create_flag(
    request: CreateFlagAPIRequest,
    create_flag_use_case: FromDishka[CreateFlagUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> FlagItem:
    """Report a term, definition, comment or dicho.

    Requires authentication. A user may hold only one open flag per item.
    """
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await create_flag_use_case.execute(
        CreateFlagRequest(
            target_type=request.target_type,
            target_id=request.target_id,
            reason=request.reason,
            custom_reason=request.custom_reason,
            user_id=user_id,
        )
    )


@router.get("", response_model=ListFlagsResponse)
async def list_flags(
    list_flags_use_case: FromDishka[ListFlagsUseCase],
    jwt_service: FromDishka[JWTService],
    flag_status: FlagStatus | None = Query(default=FlagStatus.PENDING, alias="status"),
    limit: int = Query(default=20, ge=1, le=50),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListFlagsResponse:
    """Moderation queue. Moderators only."""
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await list_flags_use_case.execute(
        ListFlagsRequest(user_id=user_id, status=flag_status, limit=limit)
    )


@router.patch("/{flag_id}", response_model=FlagItem)
async def review_flag(
    flag_id: UUID,
    request: ReviewFlagAPIRequest,
    review_flag_use_case: FromDishka[ReviewFlagUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> FlagItem:
    """Record a moderator's decision on a flag.

    Args:
        flag_id: Flag UUID
        request: New status and optional notes
        review_flag_use_case: Review flag use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header, used when no cookie is sent

    Returns:
        The updated flag
    """
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await review_flag_use_case.execute(
        ReviewFlagRequest(
            flag_id=flag_id,
            status=request.status,
            moderator_notes=request.moderator_notes,
            user_id=user_id,
        )
    )
