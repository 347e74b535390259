"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from jerga.domain.model.common import DomainModel, utcnow
from jerga.domain.value import NotificationId, NotificationType, RelatedType, UserId


class Notification(DomainModel):
    """In-app notification addressed to one user."""

    id: NotificationId
    user_id: UserId
    type: NotificationType
    title: str = Field(max_length=200)
    message: str = Field(max_length=500)
    related_id: Optional[str] = None
    related_type: Optional[RelatedType] = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=utcnow)
