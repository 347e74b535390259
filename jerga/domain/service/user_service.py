"""User domain service."""

import logfire

from jerga.domain.error import NotFoundError
from jerga.domain.model import User
from jerga.domain.repository import UserRepository
from jerga.domain.value import ContributionType, LeaderboardField, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=user_id)
                raise NotFoundError("User", user_id)
            return user

    async def find_by_id(self, user_id: UserId) -> User | None:
        """Get user by ID, None if unknown."""
        return await self.user_repository.find_by_id(user_id)

    async def save(self, user: User) -> User:
        """Create a user or update their profile.

        Args:
            user: User to save

        Returns:
            Stored user
        """
        with logfire.span("user_service.save", user_id=user.id):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=saved.id, email=saved.email)
            return saved

    async def increment_contribution(
        self, user_id: UserId, contribution: ContributionType
    ) -> None:
        """Atomically increment one of the user's contribution counters.

        Args:
            user_id: User ID
            contribution: Counter to increment
        """
        with logfire.span(
            "user_service.increment_contribution",
            user_id=user_id,
            contribution=contribution.value,
        ):
            await self.user_repository.increment_contribution(user_id, contribution)
            logfire.info(
                "Contribution incremented",
                user_id=user_id,
                contribution=contribution.value,
            )

    async def get_leaderboard(
        self, field: LeaderboardField, limit: int
    ) -> list[User]:
        """Top active users by a leaderboard field.

        Args:
            field: Sort field
            limit: Maximum number of users

        Returns:
            Users, best first
        """
        with logfire.span(
            "user_service.get_leaderboard", field=field.value, limit=limit
        ):
            return await self.user_repository.find_leaderboard(field, limit)
