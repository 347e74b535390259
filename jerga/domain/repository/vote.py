"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from jerga.domain.model.vote import Vote
from jerga.domain.value import UserId, VotableType, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_votables(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_ids: Sequence[UUID],
    ) -> List[Vote]:
        """Find a user's votes on multiple items (batch query).

        Args:
            user_id: The user's ID
            votable_type: Type of items
            votable_ids: Item IDs to check

        Returns:
            Votes by the user on the specified items
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already has a vote on this item
        """
        pass

    @abstractmethod
    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType
    ) -> Optional[Vote]:
        """Change the polarity of an existing vote in place.

        Args:
            vote_id: The vote to update
            vote_type: The new polarity

        Returns:
            The updated vote, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote (retraction).

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if it no longer existed
        """
        pass

    @abstractmethod
    async def count_by_votable(
        self, votable_type: VotableType, votable_id: UUID
    ) -> int:
        """Count vote records on an item.

        Args:
            votable_type: Type of item
            votable_id: ID of the item

        Returns:
            Number of vote records
        """
        pass
