"""Flag entity.

Flags are user reports of problematic content, reviewed by moderators.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from jerga.domain.model.common import DomainModel, utcnow
from jerga.domain.value import FlagId, FlagReason, FlagStatus, FlagTargetType, UserId


class Flag(DomainModel):
    """A report against a term, definition, comment or dicho."""

    id: FlagId
    reporter_id: UserId
    target_type: FlagTargetType
    target_id: UUID
    reason: FlagReason
    custom_reason: Optional[str] = Field(default=None, max_length=500)
    status: FlagStatus = FlagStatus.PENDING
    moderator_id: Optional[UserId] = None
    moderator_notes: Optional[str] = Field(default=None, max_length=1000)
    reviewed_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
