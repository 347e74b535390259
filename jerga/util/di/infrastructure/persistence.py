"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from jerga.config import Settings
from jerga.domain.repository import (
    CommentRepository,
    DefinitionRepository,
    DichoRepository,
    FlagRepository,
    NotificationRepository,
    TermRepository,
    UserRepository,
    VoteRepository,
)
from jerga.persistence.database import create_engine, create_session_factory
from jerga.persistence.repository import (
    PostgresCommentRepository,
    PostgresDefinitionRepository,
    PostgresDichoRepository,
    PostgresFlagRepository,
    PostgresNotificationRepository,
    PostgresTermRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from jerga.util.di.base import ProviderBase
from jerga.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. Reputation, badge and
        notification writes run in savepoints, so a failure there never
        aborts the transaction holding the vote.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_term_repository(self, session: AsyncSession) -> TermRepository:
        """Provide Term repository."""
        return PostgresTermRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_definition_repository(
        self, session: AsyncSession
    ) -> DefinitionRepository:
        """Provide Definition repository."""
        return PostgresDefinitionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_dicho_repository(self, session: AsyncSession) -> DichoRepository:
        """Provide Dicho repository."""
        return PostgresDichoRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        """Provide Vote repository."""
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_flag_repository(self, session: AsyncSession) -> FlagRepository:
        """Provide Flag repository."""
        return PostgresFlagRepository(session)
