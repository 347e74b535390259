"""Mark notifications read use case."""

from uuid import UUID

from pydantic import BaseModel

from jerga.application.usecase.base import BaseUseCase, require_user
from jerga.domain.service import NotificationService
from jerga.domain.value import NotificationId


class MarkNotificationsReadRequest(BaseModel):
    """Mark notifications read request."""

    user_id: str | None
    notification_ids: list[UUID] | None = None  # None marks all


class MarkNotificationsReadResponse(BaseModel):
    """Mark notifications read response."""

    updated: int


class MarkNotificationsReadUseCase(
    BaseUseCase[MarkNotificationsReadRequest, MarkNotificationsReadResponse]
):
    """Use case for marking the caller's notifications read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationsReadRequest
    ) -> MarkNotificationsReadResponse:
        user_id = require_user(request.user_id, "update notifications")

        ids = (
            [NotificationId(i) for i in request.notification_ids]
            if request.notification_ids is not None
            else None
        )
        updated = await self.notification_service.mark_read(
            user_id, ids
        )
        return MarkNotificationsReadResponse(updated=updated)
