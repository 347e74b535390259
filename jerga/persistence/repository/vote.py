"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, func, insert, select, update

from jerga.domain.model import Vote
from jerga.domain.model.common import utcnow
from jerga.domain.repository import VoteRepository
from jerga.domain.value import UserId, VotableType, VoteId, VoteType
from jerga.persistence.mappers import row_to_vote, vote_to_dict
from jerga.persistence.repository.base import PostgresRepository
from jerga.persistence.tables import votes_table


class PostgresVoteRepository(PostgresRepository, VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
        )
        result = await self._execute(stmt)
        return [row_to_vote(dict(row)) for row in result.mappings().all()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Runs in a savepoint so a unique violation leaves the request's
        transaction usable for the retry.

        Raises:
            IntegrityError: If the user already has a vote on this item
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self._execute(stmt, savepoint=True)
        return vote

    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType
    ) -> Optional[Vote]:
        """Flip a vote's polarity in place."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=vote_type.value, updated_at=utcnow())
            .returning(votes_table)
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_vote(dict(row)) if row else None

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self._execute(stmt)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_votable(
        self, votable_type: VotableType, votable_id: UUID
    ) -> int:
        """Count vote records on an item."""
        stmt = select(func.count()).where(
            and_(
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self._execute(stmt)
        return result.scalar_one()
