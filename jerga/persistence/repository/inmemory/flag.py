"""In-memory flag repository for testing."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from jerga.domain.model import Flag
from jerga.domain.repository.flag import FlagRepository
from jerga.domain.value import FlagId, FlagStatus, FlagTargetType, UserId


class InMemoryFlagRepository(FlagRepository):
    """In-memory implementation of FlagRepository for testing."""

    def __init__(self) -> None:
        self._flags: dict[FlagId, Flag] = {}

    async def find_by_id(self, flag_id: FlagId) -> Optional[Flag]:
        """Find a flag by ID."""
        return self._flags.get(flag_id)

    async def save(self, flag: Flag) -> Flag:
        """Save a flag."""
        self._flags[flag.id] = flag
        return flag

    async def find_open_by_reporter(
        self, reporter_id: UserId, target_type: FlagTargetType, target_id: UUID
    ) -> Optional[Flag]:
        """Find an open flag by reporter on a target."""
        for flag in self._flags.values():
            if (
                flag.reporter_id == reporter_id
                and flag.target_type == target_type
                and flag.target_id == UUID(str(target_id))
                and flag.status.is_open
            ):
                return flag
        return None

    async def find_by_status(
        self, status: Optional[FlagStatus] = None, limit: int = 20
    ) -> list[Flag]:
        """Flags in a status, newest first."""
        flags = [
            f for f in self._flags.values() if status is None or f.status == status
        ]
        flags.sort(key=lambda f: f.created_at, reverse=True)
        return flags[:limit]

    async def update_review(
        self,
        flag_id: FlagId,
        status: FlagStatus,
        moderator_id: UserId,
        moderator_notes: Optional[str],
        reviewed_at: datetime,
    ) -> Optional[Flag]:
        """Record a moderator review."""
        flag = self._flags.get(flag_id)
        if flag is None:
            return None
        updated = flag.model_copy(
            update={
                "status": status,
                "moderator_id": moderator_id,
                "moderator_notes": moderator_notes,
                "reviewed_at": reviewed_at,
                "updated_at": reviewed_at,
            }
        )
        self._flags[flag_id] = updated
        return updated
