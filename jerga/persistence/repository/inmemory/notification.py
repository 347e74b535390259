"""In-memory notification repository for testing."""

from typing import Optional, Sequence

from jerga.domain.model import Notification
from jerga.domain.repository.notification import NotificationRepository
from jerga.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_by_user(
        self, user_id: UserId, unread_only: bool = False, limit: int = 20
    ) -> list[Notification]:
        """A user's notifications, newest first."""
        notifications = [
            n
            for n in self._notifications.values()
            if n.user_id == user_id and (not unread_only or not n.is_read)
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[:limit]

    async def count_unread(self, user_id: UserId) -> int:
        """Number of unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.user_id == user_id and not n.is_read
        )

    async def mark_read(
        self, user_id: UserId, notification_ids: Optional[Sequence[NotificationId]]
    ) -> int:
        """Mark notifications read."""
        wanted = set(notification_ids) if notification_ids is not None else None
        changed = 0
        for notification in list(self._notifications.values()):
            if notification.user_id != user_id or notification.is_read:
                continue
            if wanted is not None and notification.id not in wanted:
                continue
            self._notifications[notification.id] = notification.model_copy(
                update={"is_read": True}
            )
            changed += 1
        return changed
