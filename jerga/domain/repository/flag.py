"""Flag repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from jerga.domain.model.flag import Flag
from jerga.domain.value import FlagId, FlagStatus, FlagTargetType, UserId


class FlagRepository(ABC):
    """Repository for Flag entity."""

    @abstractmethod
    async def find_by_id(self, flag_id: FlagId) -> Optional[Flag]:
        """Find a flag by ID."""
        pass

    @abstractmethod
    async def save(self, flag: Flag) -> Flag:
        """Save a new flag."""
        pass

    @abstractmethod
    async def find_open_by_reporter(
        self, reporter_id: UserId, target_type: FlagTargetType, target_id: UUID
    ) -> Optional[Flag]:
        """Find a pending or reviewed flag by a reporter on a target.

        Args:
            reporter_id: The reporting user
            target_type: Type of flagged content
            target_id: ID of flagged content

        Returns:
            The open flag if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_status(
        self, status: Optional[FlagStatus] = None, limit: int = 20
    ) -> List[Flag]:
        """Flags in a given status, newest first.

        Args:
            status: Status filter, or None for all flags
            limit: Maximum number of flags

        Returns:
            Flags ordered by creation time desc
        """
        pass

    @abstractmethod
    async def update_review(
        self,
        flag_id: FlagId,
        status: FlagStatus,
        moderator_id: UserId,
        moderator_notes: Optional[str],
        reviewed_at: datetime,
    ) -> Optional[Flag]:
        """Record a moderator's review of a flag.

        Returns:
            The updated flag, or None if it does not exist
        """
        pass
