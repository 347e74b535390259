"""Unit tests for ScoreService."""

from uuid import uuid4

import pytest

from jerga.domain.error import NotFoundError, ValidationError
from jerga.domain.repository import (
    CommentRepository,
    DefinitionRepository,
    DichoRepository,
    TermRepository,
)
from jerga.domain.service import ScoreService
from jerga.domain.value import VotableType, VoteType
from tests.conftest import seed_comment, seed_definition, seed_dicho, seed_term
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestApplyDelta:
    """Tests for apply_delta."""

    @pytest.mark.asyncio
    async def test_increment_updates_counter_and_score(self, unit_env):
        # Arrange
        score_service = await unit_env.get(ScoreService)
        term = await seed_term(await unit_env.get(TermRepository))
        definition = await seed_definition(
            await unit_env.get(DefinitionRepository), term
        )

        # Act
        await score_service.apply_delta(
            VotableType.DEFINITION, definition.id, VoteType.UP, 1
        )
        counters = await score_service.apply_delta(
            VotableType.DEFINITION, definition.id, VoteType.DOWN, 1
        )

        # Assert
        assert (counters.up, counters.down, counters.score) == (1, 1, 0)

    @pytest.mark.asyncio
    async def test_decrement_below_zero_is_clamped(self, unit_env):
        """The counter stays at zero and the current counters are returned."""
        # Arrange
        score_service = await unit_env.get(ScoreService)
        definition_repo = await unit_env.get(DefinitionRepository)
        term = await seed_term(await unit_env.get(TermRepository))
        definition = await seed_definition(definition_repo, term)

        # Act
        counters = await score_service.apply_delta(
            VotableType.DEFINITION, definition.id, VoteType.DOWN, -1
        )

        # Assert
        stored = await definition_repo.find_by_id(definition.id)
        assert counters.down == 0
        assert stored.votes.down == 0
        assert stored.votes.score == 0

    @pytest.mark.asyncio
    async def test_routes_to_comment_and_dicho_repositories(self, unit_env):
        # Arrange
        score_service = await unit_env.get(ScoreService)
        term = await seed_term(await unit_env.get(TermRepository))
        definition = await seed_definition(
            await unit_env.get(DefinitionRepository), term
        )
        comment = await seed_comment(await unit_env.get(CommentRepository), definition)
        dicho = await seed_dicho(await unit_env.get(DichoRepository), term)

        # Act
        comment_counters = await score_service.apply_delta(
            VotableType.COMMENT, comment.id, VoteType.UP, 1
        )
        dicho_counters = await score_service.apply_delta(
            VotableType.DICHO, dicho.id, VoteType.DOWN, 1
        )

        # Assert
        assert comment_counters.score == 1
        assert dicho_counters.score == -1

    @pytest.mark.asyncio
    async def test_missing_item_raises_not_found(self, unit_env):
        score_service = await unit_env.get(ScoreService)

        with pytest.raises(NotFoundError):
            await score_service.apply_delta(
                VotableType.DICHO, uuid4(), VoteType.DOWN, -1
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, 2, -2])
    async def test_rejects_amounts_other_than_one(self, unit_env, amount):
        score_service = await unit_env.get(ScoreService)

        with pytest.raises(ValidationError):
            await score_service.apply_delta(
                VotableType.DEFINITION, uuid4(), VoteType.UP, amount
            )
