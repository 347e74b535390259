"""PostgreSQL implementation of Flag repository."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, insert, select, update

from jerga.domain.model import Flag
from jerga.domain.repository import FlagRepository
from jerga.domain.value import FlagId, FlagStatus, FlagTargetType, UserId
from jerga.persistence.mappers import flag_to_dict, row_to_flag
from jerga.persistence.repository.base import PostgresRepository
from jerga.persistence.tables import flags_table

OPEN_STATUSES = [status.value for status in FlagStatus if status.is_open]


class PostgresFlagRepository(PostgresRepository, FlagRepository):
    """PostgreSQL implementation of FlagRepository."""

    async def find_by_id(self, flag_id: FlagId) -> Optional[Flag]:
        stmt = select(flags_table).where(flags_table.c.id == flag_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_flag(dict(row)) if row else None

    async def save(self, flag: Flag) -> Flag:
        stmt = insert(flags_table).values(**flag_to_dict(flag))
        await self._execute(stmt)
        return flag

    async def find_open_by_reporter(
        self, reporter_id: UserId, target_type: FlagTargetType, target_id: UUID
    ) -> Optional[Flag]:
        """A pending or reviewed flag by this reporter on this target."""
        stmt = select(flags_table).where(
            and_(
                flags_table.c.reporter_id == reporter_id,
                flags_table.c.target_type == target_type.value,
                flags_table.c.target_id == target_id,
                flags_table.c.status.in_(OPEN_STATUSES),
            )
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_flag(dict(row)) if row else None

    async def find_by_status(
        self, status: Optional[FlagStatus] = None, limit: int = 20
    ) -> List[Flag]:
        stmt = select(flags_table)
        if status is not None:
            stmt = stmt.where(flags_table.c.status == status.value)
        stmt = stmt.order_by(flags_table.c.created_at.desc()).limit(limit)

        result = await self._execute(stmt)
        return [row_to_flag(dict(row)) for row in result.mappings().all()]

    async def update_review(
        self,
        flag_id: FlagId,
        status: FlagStatus,
        moderator_id: UserId,
        moderator_notes: Optional[str],
        reviewed_at: datetime,
    ) -> Optional[Flag]:
        stmt = (
            update(flags_table)
            .where(flags_table.c.id == flag_id)
            .values(
                status=status.value,
                moderator_id=moderator_id,
                moderator_notes=moderator_notes,
                reviewed_at=reviewed_at,
                updated_at=reviewed_at,
            )
            .returning(flags_table)
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_flag(dict(row)) if row else None
