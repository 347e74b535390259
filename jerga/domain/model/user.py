"""User aggregate root.

Users are created from the external identity provider and accumulate
contribution counters, reputation and badges through community activity.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from jerga.domain.model.common import DomainModel, utcnow
from jerga.domain.value import ContributionCounters, Region, UserId, UserRole


class User(DomainModel):
    """User aggregate root.

    ``contributions`` only grow. ``reputation`` is derived from them and
    ``badges`` only grow; both are written by dedicated repository operations
    rather than by saving the whole user.
    """

    id: UserId
    name: str
    email: str
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    contributions: ContributionCounters = Field(default_factory=ContributionCounters)
    badges: list[str] = Field(default_factory=list)
    reputation: int = Field(default=0, ge=0)
    role: UserRole = UserRole.USER
    region: Region = Region.GENERAL
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_moderator(self) -> bool:
        """Whether the user may review flagged content."""
        return self.role in (UserRole.MODERATOR, UserRole.ADMIN)
