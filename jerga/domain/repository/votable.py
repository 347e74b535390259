"""Shared contract for repositories of votable entities."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from jerga.domain.value import UserId, VoteCounters, VoteType


class VotableRepository(ABC):
    """Operations the vote ledger needs from any votable collection."""

    @abstractmethod
    async def find_votable(
        self, votable_id: UUID
    ) -> Optional[tuple[UserId, VoteCounters]]:
        """Find an active votable item.

        Args:
            votable_id: ID of the item

        Returns:
            (author ID, current counters) if the item exists and is active,
            None otherwise
        """
        pass

    @abstractmethod
    async def increment_votes(
        self, votable_id: UUID, vote_type: VoteType, amount: int
    ) -> Optional[VoteCounters]:
        """Atomically add ``amount`` to one polarity counter.

        The score is recomputed in the same statement. The update is not
        applied if it would take the counter below zero.

        Args:
            votable_id: ID of the item
            vote_type: Counter to change
            amount: Signed increment (+1 or -1)

        Returns:
            The counters after the update, or None if no row was updated
            (item missing or counter would go negative)
        """
        pass
