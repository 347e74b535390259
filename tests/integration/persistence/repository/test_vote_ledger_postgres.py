"""Integration tests for the vote ledger against PostgreSQL.

These tests verify that the ledger and the denormalized counters stay in
step when both live in the database.

Run with a disposable database:
    DATABASE__URL=postgresql+asyncpg://... pytest -m integration
"""

import pytest
import pytest_asyncio
from dishka import AsyncContainer
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from jerga.domain.error import PersistenceError
from jerga.domain.model import VoteAction
from jerga.domain.repository import (
    DefinitionRepository,
    TermRepository,
    UserRepository,
    VoteRepository,
)
from jerga.domain.service import NotificationService, VoteService
from jerga.domain.value import NotificationType, UserId, VotableType
from tests.conftest import seed_definition, seed_term, seed_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)

    await session.execute(
        text(
            "TRUNCATE TABLE flags, notifications, votes, comments, dichos, "
            "definitions, terms, users CASCADE"
        )
    )
    await session.commit()

    yield


class TestVoteLedgerPostgres:
    """Vote transitions persisted through the real repositories."""

    @pytest.mark.asyncio
    async def test_flip_and_retract_keep_counters_in_step(
        self, integration_env: AsyncContainer
    ):
        # Arrange
        vote_service = await integration_env.get(VoteService)
        vote_repo = await integration_env.get(VoteRepository)
        definition_repo = await integration_env.get(DefinitionRepository)
        term = await seed_term(await integration_env.get(TermRepository))
        definition = await seed_definition(definition_repo, term)
        voter = UserId("voter")

        # Act
        created = await vote_service.cast_vote(
            voter, VotableType.DEFINITION, definition.id, "up"
        )
        flipped = await vote_service.cast_vote(
            voter, VotableType.DEFINITION, definition.id, "down"
        )

        # Assert
        assert created.transition.action == VoteAction.CREATED
        assert flipped.transition.action == VoteAction.FLIPPED

        stored = await definition_repo.find_by_id(definition.id)
        assert (stored.votes.up, stored.votes.down, stored.votes.score) == (0, 1, -1)
        ledger_rows = await vote_repo.count_by_votable(
            VotableType.DEFINITION, definition.id
        )
        assert ledger_rows == 1

        # Act - retract
        retracted = await vote_service.cast_vote(
            voter, VotableType.DEFINITION, definition.id, "down"
        )

        # Assert
        assert retracted.transition.action == VoteAction.RETRACTED
        stored = await definition_repo.find_by_id(definition.id)
        assert (stored.votes.up, stored.votes.down, stored.votes.score) == (0, 0, 0)
        assert (
            await vote_repo.find_by_user_and_votable(
                voter, VotableType.DEFINITION, definition.id
            )
            is None
        )

    @pytest.mark.asyncio
    async def test_badges_are_added_once(self, integration_env: AsyncContainer):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        user = await seed_user(user_repo, user_id="ana")

        # Act
        first = await user_repo.add_badge(user.id, "newbie")
        second = await user_repo.add_badge(user.id, "newbie")

        # Assert
        assert first is True
        assert second is False
        stored = await user_repo.find_by_id(user.id)
        assert stored.badges == ["newbie"]

    @pytest.mark.asyncio
    async def test_failed_notification_keeps_vote_committed(
        self, integration_env: AsyncContainer
    ):
        # Arrange
        session = await integration_env.get(AsyncSession)
        vote_service = await integration_env.get(VoteService)
        notification_service = await integration_env.get(NotificationService)
        user_repo = await integration_env.get(UserRepository)
        vote_repo = await integration_env.get(VoteRepository)
        definition_repo = await integration_env.get(DefinitionRepository)
        voter = await seed_user(user_repo, user_id="voter")
        term = await seed_term(await integration_env.get(TermRepository))
        definition = await seed_definition(definition_repo, term)

        await vote_service.cast_vote(
            voter.id, VotableType.DEFINITION, definition.id, "up"
        )

        # Act - recipient id overflows the column, so the INSERT is rejected
        with pytest.raises(PersistenceError):
            await notification_service.emit(
                user_id=UserId("x" * 300),
                type=NotificationType.VOTE,
                title="¡Voto positivo!",
                message="Alguien votó tu definición.",
            )
        awarded = await user_repo.add_badge(voter.id, "newbie")
        await session.commit()

        # Assert
        assert awarded is True
        stored = await definition_repo.find_by_id(definition.id)
        assert (stored.votes.up, stored.votes.score) == (1, 1)
        assert (
            await vote_repo.find_by_user_and_votable(
                voter.id, VotableType.DEFINITION, definition.id
            )
            is not None
        )
        assert (await user_repo.find_by_id(voter.id)).badges == ["newbie"]
