"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from jerga.domain.model.notification import Notification
from jerga.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a new notification."""
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, unread_only: bool = False, limit: int = 20
    ) -> List[Notification]:
        """A user's notifications, newest first.

        Args:
            user_id: Recipient
            unread_only: Only return unread notifications
            limit: Maximum number of notifications

        Returns:
            Notifications ordered by creation time desc
        """
        pass

    @abstractmethod
    async def count_unread(self, user_id: UserId) -> int:
        """Number of unread notifications for a user."""
        pass

    @abstractmethod
    async def mark_read(
        self, user_id: UserId, notification_ids: Optional[Sequence[NotificationId]]
    ) -> int:
        """Mark a user's notifications as read.

        Args:
            user_id: Recipient; notifications of other users are never touched
            notification_ids: IDs to mark, or None for all of the user's
                notifications

        Returns:
            Number of notifications changed
        """
        pass
