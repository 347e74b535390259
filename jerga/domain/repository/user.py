"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from jerga.domain.model.user import User
from jerga.domain.value import ContributionType, LeaderboardField, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Counters, reputation and badges are changed only through the dedicated
    atomic operations below, never by saving a whole user.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's identity-provider ID

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Create a user or update their profile fields.

        Contribution counters, reputation, badges and role of an existing
        user are left untouched.

        Args:
            user: The user to save

        Returns:
            The stored user
        """
        pass

    @abstractmethod
    async def increment_contribution(
        self, user_id: UserId, contribution: ContributionType, amount: int = 1
    ) -> None:
        """Atomically increment one contribution counter.

        Args:
            user_id: The user's ID
            contribution: Counter to increment
            amount: Increment (positive)
        """
        pass

    @abstractmethod
    async def update_reputation(self, user_id: UserId, reputation: int) -> bool:
        """Store a recomputed reputation value.

        Args:
            user_id: The user's ID
            reputation: New reputation

        Returns:
            True if the user exists
        """
        pass

    @abstractmethod
    async def add_badge(self, user_id: UserId, badge_id: str) -> bool:
        """Atomically add a badge to the user's badge set.

        Adding a badge the user already holds is a no-op.

        Args:
            user_id: The user's ID
            badge_id: Catalog badge ID

        Returns:
            True if the badge was newly added
        """
        pass

    @abstractmethod
    async def find_leaderboard(
        self, field: LeaderboardField, limit: int
    ) -> List[User]:
        """Top active users ordered by a field, descending.

        Args:
            field: Sort field
            limit: Maximum number of users

        Returns:
            Users ordered by the field (ties by creation time)
        """
        pass
