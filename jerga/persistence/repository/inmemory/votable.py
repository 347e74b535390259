"""Shared vote counter handling for in-memory votable repositories."""

from typing import Generic, Optional, TypeVar
from uuid import UUID

from jerga.domain.model import Comment, Definition, Dicho
from jerga.domain.value import UserId, VoteCounters, VoteType

V = TypeVar("V", Definition, Comment, Dicho)


class InMemoryVotableStore(Generic[V]):
    """Dict-backed store for entities carrying ``votes`` counters."""

    def __init__(self) -> None:
        self._items: dict[UUID, V] = {}

    async def find_votable(
        self, votable_id: UUID
    ) -> Optional[tuple[UserId, VoteCounters]]:
        """Find an active votable item."""
        item = self._items.get(UUID(str(votable_id)))
        if item is None or not item.is_active:
            return None
        return item.author_id, item.votes

    async def increment_votes(
        self, votable_id: UUID, vote_type: VoteType, amount: int
    ) -> Optional[VoteCounters]:
        """Increment one polarity counter unless it would go negative."""
        key = UUID(str(votable_id))
        item = self._items.get(key)
        if item is None:
            return None

        current = item.votes.count_for(vote_type)
        if current + amount < 0:
            return None

        counters = item.votes.model_copy(update={vote_type.value: current + amount})
        self._items[key] = item.model_copy(update={"votes": counters})
        return counters
