"""PostgreSQL implementation of Definition repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import and_, func, insert, select

from jerga.domain.model import Definition, TermActivity, TermVoteStats
from jerga.domain.repository import DefinitionRepository
from jerga.domain.value import DefinitionId, Region, TermId
from jerga.persistence.mappers import definition_to_dict, row_to_definition
from jerga.persistence.repository.base import PostgresVotableRepository, escape_like
from jerga.persistence.tables import definitions_table

_BEST_FIRST = (
    definitions_table.c.votes_score.desc(),
    definitions_table.c.created_at.desc(),
)


class PostgresDefinitionRepository(PostgresVotableRepository, DefinitionRepository):
    """PostgreSQL implementation of DefinitionRepository."""

    table = definitions_table

    async def find_by_id(self, definition_id: DefinitionId) -> Optional[Definition]:
        """Find a definition by ID."""
        stmt = select(definitions_table).where(definitions_table.c.id == definition_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_definition(dict(row)) if row else None

    async def save(self, definition: Definition) -> Definition:
        """Insert a definition."""
        stmt = insert(definitions_table).values(**definition_to_dict(definition))
        await self._execute(stmt)
        return definition

    async def find_by_term(
        self, term_id: TermId, region: Optional[Region] = None
    ) -> List[Definition]:
        """Active definitions of a term, best first."""
        stmt = select(definitions_table).where(
            and_(
                definitions_table.c.term_id == term_id,
                definitions_table.c.is_active.is_(True),
            )
        )
        if region is not None:
            stmt = stmt.where(definitions_table.c.region == region.value)
        stmt = stmt.order_by(*_BEST_FIRST)

        result = await self._execute(stmt)
        return [row_to_definition(dict(row)) for row in result.mappings().all()]

    async def get_term_stats(self, term_id: TermId) -> TermVoteStats:
        """Aggregate counters over a term's active definitions."""
        stmt = select(
            func.count().label("definition_count"),
            func.coalesce(func.sum(definitions_table.c.votes_up), 0).label("total_up"),
            func.coalesce(func.sum(definitions_table.c.votes_down), 0).label(
                "total_down"
            ),
        ).where(
            and_(
                definitions_table.c.term_id == term_id,
                definitions_table.c.is_active.is_(True),
            )
        )
        result = await self._execute(stmt)
        row = result.mappings().one()
        return TermVoteStats(
            definition_count=row["definition_count"],
            total_up=row["total_up"],
            total_down=row["total_down"],
        )

    def _in_window(
        self, window_start: datetime, window_end: datetime, region: Optional[Region]
    ) -> list:
        conditions = [
            definitions_table.c.is_active.is_(True),
            definitions_table.c.created_at >= window_start,
            definitions_table.c.created_at <= window_end,
        ]
        if region is not None:
            conditions.append(definitions_table.c.region == region.value)
        return conditions

    async def aggregate_term_activity(
        self,
        window_start: datetime,
        window_end: datetime,
        region: Optional[Region] = None,
    ) -> List[TermActivity]:
        """Group definitions created in the window by term."""
        stmt = (
            select(
                definitions_table.c.term_id,
                func.count().label("definition_count"),
                func.sum(definitions_table.c.votes_score).label("total_vote_score"),
                func.max(definitions_table.c.created_at).label("latest_activity"),
            )
            .where(and_(*self._in_window(window_start, window_end, region)))
            .group_by(definitions_table.c.term_id)
        )
        result = await self._execute(stmt)
        return [
            TermActivity(
                term_id=TermId(row["term_id"]),
                definition_count=row["definition_count"],
                total_vote_score=row["total_vote_score"],
                latest_activity=row["latest_activity"],
            )
            for row in result.mappings().all()
        ]

    async def find_top_scored(
        self,
        window_start: datetime,
        window_end: datetime,
        region: Optional[Region] = None,
        limit: int = 10,
    ) -> List[Definition]:
        """Positively scored definitions created in the window."""
        stmt = (
            select(definitions_table)
            .where(
                and_(
                    *self._in_window(window_start, window_end, region),
                    definitions_table.c.votes_score > 0,
                )
            )
            .order_by(*_BEST_FIRST)
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [row_to_definition(dict(row)) for row in result.mappings().all()]

    async def search(
        self, query: str, region: Optional[Region] = None, limit: int = 20
    ) -> List[Definition]:
        """Case-insensitive substring search over definition content."""
        stmt = select(definitions_table).where(
            and_(
                definitions_table.c.is_active.is_(True),
                definitions_table.c.content.ilike(
                    f"%{escape_like(query)}%", escape="\\"
                ),
            )
        )
        if region is not None:
            stmt = stmt.where(definitions_table.c.region == region.value)
        stmt = stmt.order_by(*_BEST_FIRST).limit(limit)

        result = await self._execute(stmt)
        return [row_to_definition(dict(row)) for row in result.mappings().all()]
