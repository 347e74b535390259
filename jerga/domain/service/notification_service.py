"""Notification domain service."""

from typing import Optional, Sequence
from uuid import uuid4

import logfire

from jerga.domain.model import Notification
from jerga.domain.repository import NotificationRepository
from jerga.domain.value import NotificationId, NotificationType, RelatedType, UserId

from .base import Service


class NotificationService(Service):
    """Creates and reads in-app notifications.

    Delivery beyond the in-app inbox (email, push) is not handled here.
    """

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def emit(
        self,
        user_id: UserId,
        type: NotificationType,
        title: str,
        message: str,
        related_id: Optional[str] = None,
        related_type: Optional[RelatedType] = None,
    ) -> Notification:
        """Create a notification for a user.

        Args:
            user_id: Recipient
            type: Notification kind
            title: Short title
            message: Body text
            related_id: ID of the related entity, if any
            related_type: Kind of the related entity, if any

        Returns:
            Stored notification
        """
        with logfire.span(
            "notification_service.emit", user_id=user_id, type=type.value
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                user_id=user_id,
                type=type,
                title=title,
                message=message,
                related_id=related_id,
                related_type=related_type,
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                user_id=user_id,
                type=type.value,
                notification_id=str(saved.id),
            )
            return saved

    async def list_for_user(
        self, user_id: UserId, unread_only: bool, limit: int
    ) -> tuple[list[Notification], int]:
        """A user's notifications and their unread count.

        Returns:
            (notifications newest first, unread count)
        """
        with logfire.span(
            "notification_service.list_for_user",
            user_id=user_id,
            unread_only=unread_only,
        ):
            notifications = await self.notification_repository.find_by_user(
                user_id, unread_only=unread_only, limit=limit
            )
            unread = await self.notification_repository.count_unread(user_id)
            return notifications, unread

    async def mark_read(
        self, user_id: UserId, notification_ids: Optional[Sequence[NotificationId]]
    ) -> int:
        """Mark notifications read; None marks all of the user's notifications."""
        with logfire.span("notification_service.mark_read", user_id=user_id):
            changed = await self.notification_repository.mark_read(
                user_id, notification_ids
            )
            logfire.info("Notifications marked read", user_id=user_id, count=changed)
            return changed
