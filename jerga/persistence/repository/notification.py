"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, func, insert, select, update

from jerga.domain.model import Notification
from jerga.domain.repository import NotificationRepository
from jerga.domain.value import NotificationId, UserId
from jerga.persistence.mappers import notification_to_dict, row_to_notification
from jerga.persistence.repository.base import PostgresRepository
from jerga.persistence.tables import notifications_table


class PostgresNotificationRepository(PostgresRepository, NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        stmt = insert(notifications_table).values(**notification_to_dict(notification))
        await self._execute(stmt, savepoint=True)
        return notification

    async def find_by_user(
        self, user_id: UserId, unread_only: bool = False, limit: int = 20
    ) -> List[Notification]:
        """A user's notifications, newest first."""
        stmt = select(notifications_table).where(
            notifications_table.c.user_id == user_id
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.is_read.is_(False))
        stmt = stmt.order_by(notifications_table.c.created_at.desc()).limit(limit)

        result = await self._execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def count_unread(self, user_id: UserId) -> int:
        """Number of unread notifications for a user."""
        stmt = select(func.count()).where(
            and_(
                notifications_table.c.user_id == user_id,
                notifications_table.c.is_read.is_(False),
            )
        )
        result = await self._execute(stmt)
        return result.scalar_one()

    async def mark_read(
        self, user_id: UserId, notification_ids: Optional[Sequence[NotificationId]]
    ) -> int:
        """Mark a user's notifications read; None marks all of them."""
        conditions = [
            notifications_table.c.user_id == user_id,
            notifications_table.c.is_read.is_(False),
        ]
        if notification_ids is not None:
            if not notification_ids:
                return 0
            conditions.append(notifications_table.c.id.in_(notification_ids))

        stmt = update(notifications_table).where(and_(*conditions)).values(is_read=True)
        result = await self._execute(stmt)
        return result.rowcount  # type: ignore[attr-defined]
