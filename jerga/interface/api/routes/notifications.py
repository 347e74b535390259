"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query
from pydantic import BaseModel

from jerga.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadResponse,
    MarkNotificationsReadUseCase,
)
from jerga.domain.service import JWTService
from jerga.interface.api.auth import current_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class MarkReadAPIRequest(BaseModel):
    """API request for marking notifications read."""

    notification_ids: list[UUID] | None = None  # Omit to mark all


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    unread_only: bool = False,
    limit: int = Query(default=20, ge=1, le=50),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """The caller's notifications, newest first, with the unread count."""
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=user_id, unread_only=unread_only, limit=limit
        )
    )


@router.patch("", response_model=MarkNotificationsReadResponse)
async def mark_notifications_read(
    request: MarkReadAPIRequest,
    mark_notifications_read_use_case: FromDishka[MarkNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> MarkNotificationsReadResponse:
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await mark_notifications_read_use_case.execute(
        MarkNotificationsReadRequest(
            user_id=user_id, notification_ids=request.notification_ids
        )
    )
