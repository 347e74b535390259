"""PostgreSQL implementation of Term repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, exists, func, insert, or_, select
from sqlalchemy.sql import Select

from jerga.domain.model import Term
from jerga.domain.repository import TermRepository
from jerga.domain.value import Region, TermId, Word
from jerga.persistence.mappers import row_to_term, term_to_dict
from jerga.persistence.repository.base import PostgresRepository, escape_like
from jerga.persistence.tables import definitions_table, terms_table


class PostgresTermRepository(PostgresRepository, TermRepository):
    """PostgreSQL implementation of TermRepository."""

    async def find_by_id(self, term_id: TermId) -> Optional[Term]:
        """Find a term by ID."""
        stmt = select(terms_table).where(terms_table.c.id == term_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_term(dict(row)) if row else None

    async def find_by_ids(self, term_ids: Sequence[TermId]) -> List[Term]:
        """Find active terms by ID (batch query)."""
        if not term_ids:
            return []

        stmt = select(terms_table).where(
            and_(terms_table.c.id.in_(term_ids), terms_table.c.is_active.is_(True))
        )
        result = await self._execute(stmt)
        return [row_to_term(dict(row)) for row in result.mappings().all()]

    async def find_by_word(
        self, word: Word, region: Optional[Region] = None
    ) -> Optional[Term]:
        """Find an active term by word, oldest first if several regions match."""
        stmt = select(terms_table).where(
            and_(terms_table.c.word == word.root, terms_table.c.is_active.is_(True))
        )
        if region is not None:
            stmt = stmt.where(terms_table.c.region == region.value)
        stmt = stmt.order_by(terms_table.c.created_at, terms_table.c.id).limit(1)

        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_term(dict(row)) if row else None

    async def save(self, term: Term) -> Term:
        """Insert a term inside a savepoint.

        Raises:
            IntegrityError: If the word already exists in that region
        """
        stmt = insert(terms_table).values(**term_to_dict(term))
        await self._execute(stmt, savepoint=True)
        return term

    def _eligible(self, stmt: Select, region: Optional[Region]) -> Select:
        """Restrict to active terms with at least one active definition."""
        has_definition = exists().where(
            and_(
                definitions_table.c.term_id == terms_table.c.id,
                definitions_table.c.is_active.is_(True),
            )
        )
        stmt = stmt.where(and_(terms_table.c.is_active.is_(True), has_definition))
        if region is not None:
            stmt = stmt.where(terms_table.c.region == region.value)
        return stmt

    async def count_eligible(self, region: Optional[Region] = None) -> int:
        """Count eligible terms."""
        stmt = self._eligible(select(func.count()).select_from(terms_table), region)
        result = await self._execute(stmt)
        return result.scalar_one()

    async def find_eligible_at(
        self, position: int, region: Optional[Region] = None
    ) -> Optional[Term]:
        """Eligible term at a position in (created_at, id) order."""
        stmt = (
            self._eligible(select(terms_table), region)
            .order_by(terms_table.c.created_at.asc(), terms_table.c.id.asc())
            .offset(position)
            .limit(1)
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_term(dict(row)) if row else None

    async def search(
        self, query: str, region: Optional[Region] = None, limit: int = 20
    ) -> List[Term]:
        """Case-insensitive substring search over words and tags."""
        pattern = f"%{escape_like(query)}%"
        # Tags are matched as one newline-joined string
        tags_text = func.array_to_string(terms_table.c.tags, "\n")
        stmt = select(terms_table).where(
            and_(
                terms_table.c.is_active.is_(True),
                or_(
                    terms_table.c.word.ilike(pattern, escape="\\"),
                    tags_text.ilike(pattern, escape="\\"),
                ),
            )
        )
        if region is not None:
            stmt = stmt.where(terms_table.c.region == region.value)
        stmt = stmt.order_by(terms_table.c.created_at.desc()).limit(limit)

        result = await self._execute(stmt)
        return [row_to_term(dict(row)) for row in result.mappings().all()]
