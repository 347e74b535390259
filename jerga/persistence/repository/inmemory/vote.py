"""In-memory vote repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from jerga.domain.model.common import utcnow
from jerga.domain.model.vote import Vote
from jerga.domain.repository.vote import VoteRepository
from jerga.domain.value import UserId, VotableType, VoteId, VoteType


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        return self._votes.get(vote_id)

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        votable_uuid = UUID(str(votable_id))
        for vote in self._votes.values():
            if (
                vote.user_id == user_id
                and vote.votable_type == votable_type
                and vote.votable_id == votable_uuid
            ):
                return vote
        return None

    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> list[Vote]:
        """Find a user's votes on multiple items (batch query)."""
        if not votable_ids:
            return []

        votable_uuids = {UUID(str(vid)) for vid in votable_ids}
        return [
            v
            for v in self._votes.values()
            if v.user_id == user_id
            and v.votable_type == votable_type
            and v.votable_id in votable_uuids
        ]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_user_and_votable(
            vote.user_id, vote.votable_type, vote.votable_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes[vote.id] = vote
        return vote

    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType
    ) -> Optional[Vote]:
        """Flip a vote's polarity."""
        vote = self._votes.get(vote_id)
        if vote is None:
            return None
        updated = vote.model_copy(update={"vote_type": vote_type, "updated_at": utcnow()})
        self._votes[vote_id] = updated
        return updated

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        return self._votes.pop(vote_id, None) is not None

    async def count_by_votable(
        self, votable_type: VotableType, votable_id: UUID
    ) -> int:
        """Count votes for a votable item."""
        votable_uuid = UUID(str(votable_id))
        return sum(
            1
            for v in self._votes.values()
            if v.votable_type == votable_type and v.votable_id == votable_uuid
        )
