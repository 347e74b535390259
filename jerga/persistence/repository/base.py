"""Shared plumbing for PostgreSQL repositories."""

from typing import Any, Optional
from uuid import UUID

import logfire
from sqlalchemy import Table, and_, select, update
from sqlalchemy.engine import Result
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from jerga.domain.error import PersistenceError
from jerga.domain.value import UserId, VoteCounters, VoteType
from jerga.persistence.mappers import row_to_counters


def escape_like(query: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class PostgresRepository:
    """Base for repositories bound to a request-scoped session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(
        self, stmt: Executable, savepoint: bool = False
    ) -> Result[Any]:
        """Execute a statement, reporting driver failures as PersistenceError.

        IntegrityError is re-raised unchanged so callers can react to
        constraint violations.

        Args:
            stmt: Statement to execute
            savepoint: Run inside a SAVEPOINT, so a failure rolls back only
                this statement and leaves the request transaction usable
        """
        try:
            if savepoint:
                async with self.session.begin_nested():
                    return await self.session.execute(stmt)
            return await self.session.execute(stmt)
        except IntegrityError:
            raise
        except DBAPIError as e:
            logfire.error("Database error", error=str(e))
            raise PersistenceError(str(e)) from e


class PostgresVotableRepository(PostgresRepository):
    """Vote counter operations over a table with ``votes_*`` columns."""

    table: Table

    async def find_votable(
        self, votable_id: UUID
    ) -> Optional[tuple[UserId, VoteCounters]]:
        """Find an active votable item's author and counters."""
        stmt = select(
            self.table.c.author_id, self.table.c.votes_up, self.table.c.votes_down
        ).where(and_(self.table.c.id == votable_id, self.table.c.is_active.is_(True)))
        result = await self._execute(stmt)
        row = result.mappings().first()
        return (UserId(row["author_id"]), row_to_counters(row)) if row else None

    async def increment_votes(
        self, votable_id: UUID, vote_type: VoteType, amount: int
    ) -> Optional[VoteCounters]:
        """Atomically move one counter and recompute the score.

        The guard in the WHERE clause keeps the counter from going negative;
        no row is returned in that case.
        """
        up, down, score = (
            self.table.c.votes_up,
            self.table.c.votes_down,
            self.table.c.votes_score,
        )
        if vote_type == VoteType.UP:
            values = {up: up + amount, score: score + amount}
            guard = up + amount >= 0
        else:
            values = {down: down + amount, score: score - amount}
            guard = down + amount >= 0

        stmt = (
            update(self.table)
            .where(and_(self.table.c.id == votable_id, guard))
            .values(values)
            .returning(up, down)
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_counters(row) if row else None
