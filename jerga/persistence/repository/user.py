"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import and_, not_, select, update
from sqlalchemy.dialects.postgresql import insert

from jerga.domain.model import User
from jerga.domain.model.common import utcnow
from jerga.domain.repository import UserRepository
from jerga.domain.value import ContributionType, LeaderboardField, UserId
from jerga.persistence.mappers import row_to_user, user_to_dict
from jerga.persistence.repository.base import PostgresRepository
from jerga.persistence.tables import users_table

# Columns an identity provider sync may overwrite
PROFILE_COLUMNS = ("name", "email", "username", "avatar_url", "region")


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self._execute(stmt, savepoint=True)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Insert a user, or update only the profile of an existing one.

        Uses INSERT ... ON CONFLICT so counters, reputation and badges of an
        existing user are never overwritten.
        """
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                **{col: stmt.excluded[col] for col in PROFILE_COLUMNS},
                "updated_at": utcnow(),
            },
        ).returning(users_table)
        result = await self._execute(stmt)
        return row_to_user(dict(result.mappings().one()))

    async def increment_contribution(
        self, user_id: UserId, contribution: ContributionType, amount: int = 1
    ) -> None:
        """Atomically increment one contribution counter."""
        column = users_table.c[contribution.value]
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values({column: column + amount, users_table.c.updated_at: utcnow()})
        )
        await self._execute(stmt)

    async def update_reputation(self, user_id: UserId, reputation: int) -> bool:
        """Store a recomputed reputation value."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(reputation=reputation)
        )
        result = await self._execute(stmt, savepoint=True)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def add_badge(self, user_id: UserId, badge_id: str) -> bool:
        """Append a badge unless already held, in one statement."""
        stmt = (
            update(users_table)
            .where(
                and_(
                    users_table.c.id == user_id,
                    not_(users_table.c.badges.any(badge_id)),
                )
            )
            .values(badges=users_table.c.badges + [badge_id])
        )
        result = await self._execute(stmt, savepoint=True)
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_leaderboard(
        self, field: LeaderboardField, limit: int
    ) -> List[User]:
        """Top active users by a field, earliest account first on ties."""
        column = users_table.c[field.value]
        stmt = (
            select(users_table)
            .where(users_table.c.is_active.is_(True))
            .order_by(column.desc(), users_table.c.created_at.asc())
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]
