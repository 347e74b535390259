"""In-memory user repository for testing."""

from typing import Optional

from jerga.domain.model.common import utcnow
from jerga.domain.model.user import User
from jerga.domain.repository.user import UserRepository
from jerga.domain.value import ContributionType, LeaderboardField, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        """Create a user or update their profile fields."""
        existing = self._users.get(user.id)
        if existing:
            user = existing.model_copy(
                update={
                    "name": user.name,
                    "email": user.email,
                    "username": user.username,
                    "avatar_url": user.avatar_url,
                    "region": user.region,
                    "updated_at": utcnow(),
                }
            )
        self._users[user.id] = user
        return user

    async def increment_contribution(
        self, user_id: UserId, contribution: ContributionType, amount: int = 1
    ) -> None:
        """Increment one contribution counter."""
        user = self._users.get(user_id)
        if user:
            current = user.contributions.get(contribution)
            contributions = user.contributions.model_copy(
                update={contribution.value: current + amount}
            )
            self._users[user_id] = user.model_copy(
                update={"contributions": contributions}
            )

    async def update_reputation(self, user_id: UserId, reputation: int) -> bool:
        """Store a recomputed reputation value."""
        user = self._users.get(user_id)
        if not user:
            return False
        self._users[user_id] = user.model_copy(update={"reputation": reputation})
        return True

    async def add_badge(self, user_id: UserId, badge_id: str) -> bool:
        """Add a badge unless already held."""
        user = self._users.get(user_id)
        if not user or badge_id in user.badges:
            return False
        self._users[user_id] = user.model_copy(
            update={"badges": [*user.badges, badge_id]}
        )
        return True

    async def find_leaderboard(
        self, field: LeaderboardField, limit: int
    ) -> list[User]:
        """Top active users by a field."""

        def sort_key(user: User) -> int:
            if field == LeaderboardField.REPUTATION:
                return user.reputation
            return user.contributions.get(ContributionType(field.value))

        active = [u for u in self._users.values() if u.is_active]
        active.sort(key=lambda u: u.created_at)
        active.sort(key=sort_key, reverse=True)
        return active[:limit]
