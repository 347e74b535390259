"""List notifications use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from jerga.application.usecase.base import BaseUseCase, require_user
from jerga.domain.service import NotificationService
from jerga.domain.value import NotificationType, RelatedType


class NotificationItem(BaseModel):
    """Notification in response."""

    notification_id: str
    type: NotificationType
    title: str
    message: str
    related_id: str | None
    related_type: RelatedType | None
    is_read: bool
    created_at: datetime


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str | None
    unread_only: bool = False
    limit: int = Field(default=20, ge=1, le=50)


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    unread_count: int


class ListNotificationsUseCase(
    BaseUseCase[ListNotificationsRequest, ListNotificationsResponse]
):
    """Use case for the caller's notification inbox."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        user_id = require_user(request.user_id, "view notifications")

        notifications, unread = await self.notification_service.list_for_user(
            user_id, request.unread_only, request.limit
        )
        return ListNotificationsResponse(
            notifications=[
                NotificationItem(
                    notification_id=str(n.id),
                    type=n.type,
                    title=n.title,
                    message=n.message,
                    related_id=n.related_id,
                    related_type=n.related_type,
                    is_read=n.is_read,
                    created_at=n.created_at,
                )
                for n in notifications
            ],
            unread_count=unread,
        )
