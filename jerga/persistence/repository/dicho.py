"""PostgreSQL implementation of Dicho repository."""

from typing import List, Optional

from sqlalchemy import and_, insert, select

from jerga.domain.model import Dicho
from jerga.domain.repository import DichoRepository
from jerga.domain.value import DichoId, Region, TermId
from jerga.persistence.mappers import dicho_to_dict, row_to_dicho
from jerga.persistence.repository.base import PostgresVotableRepository
from jerga.persistence.tables import dichos_table


class PostgresDichoRepository(PostgresVotableRepository, DichoRepository):
    """PostgreSQL implementation of DichoRepository."""

    table = dichos_table

    async def find_by_id(self, dicho_id: DichoId) -> Optional[Dicho]:
        stmt = select(dichos_table).where(dichos_table.c.id == dicho_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_dicho(dict(row)) if row else None

    async def save(self, dicho: Dicho) -> Dicho:
        stmt = insert(dichos_table).values(**dicho_to_dict(dicho))
        await self._execute(stmt)
        return dicho

    async def find_by_term(
        self, term_id: TermId, region: Optional[Region] = None, limit: int = 20
    ) -> List[Dicho]:
        stmt = select(dichos_table).where(
            and_(dichos_table.c.term_id == term_id, dichos_table.c.is_active.is_(True))
        )
        if region is not None:
            stmt = stmt.where(dichos_table.c.region == region.value)
        stmt = stmt.order_by(
            dichos_table.c.votes_score.desc(), dichos_table.c.created_at.desc()
        ).limit(limit)

        result = await self._execute(stmt)
        return [row_to_dicho(dict(row)) for row in result.mappings().all()]
