"""Unit tests for VoteService (the vote ledger)."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from jerga.domain.error import NotFoundError, UnauthenticatedError, ValidationError
from jerga.domain.model import Vote, VoteAction
from jerga.domain.repository import (
    DefinitionRepository,
    TermRepository,
    UserRepository,
    VoteRepository,
)
from jerga.domain.service import ScoreService, UserService, VoteService
from jerga.domain.value import UserId, VotableType, VoteId, VoteType
from jerga.persistence.repository.inmemory import InMemoryVoteRepository
from tests.conftest import seed_definition, seed_term, seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _definition(unit_env):
    term_repo = await unit_env.get(TermRepository)
    definition_repo = await unit_env.get(DefinitionRepository)
    term = await seed_term(term_repo)
    return await seed_definition(definition_repo, term)


class TestCastVote:
    """Tests for cast_vote."""

    @pytest.mark.asyncio
    async def test_first_vote_creates_ledger_entry_and_counts(self, unit_env):
        """A first up-vote creates one ledger row and moves up by one."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        definition = await _definition(unit_env)
        voter = UserId("voter")

        # Act
        outcome = await vote_service.cast_vote(
            voter, VotableType.DEFINITION, definition.id, "up"
        )

        # Assert
        assert outcome.transition.action == VoteAction.CREATED
        assert (outcome.counters.up, outcome.counters.down) == (1, 0)
        assert outcome.counters.score == 1
        assert outcome.author_id == definition.author_id
        assert await vote_repo.count_by_votable(
            VotableType.DEFINITION, definition.id
        ) == 1

    @pytest.mark.asyncio
    async def test_repeat_vote_retracts(self, unit_env):
        """Voting the same way twice leaves no vote and zero counters."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        definition = await _definition(unit_env)
        voter = UserId("voter")
        await vote_service.cast_vote(voter, VotableType.DEFINITION, definition.id, "up")

        # Act
        outcome = await vote_service.cast_vote(
            voter, VotableType.DEFINITION, definition.id, "up"
        )

        # Assert
        assert outcome.transition.action == VoteAction.RETRACTED
        assert outcome.transition.resulting_vote_type is None
        assert (outcome.counters.up, outcome.counters.down) == (0, 0)
        assert await vote_repo.find_by_user_and_votable(
            voter, VotableType.DEFINITION, definition.id
        ) is None

    @pytest.mark.asyncio
    async def test_opposite_vote_flips_in_place(self, unit_env):
        """Flipping keeps one ledger row and moves score by two."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        definition = await _definition(unit_env)
        voter = UserId("voter")
        await vote_service.cast_vote(voter, VotableType.DEFINITION, definition.id, "up")

        # Act
        outcome = await vote_service.cast_vote(
            voter, VotableType.DEFINITION, definition.id, "down"
        )

        # Assert
        assert outcome.transition.action == VoteAction.FLIPPED
        assert (outcome.counters.up, outcome.counters.down) == (0, 1)
        assert outcome.counters.score == -1
        assert await vote_repo.count_by_votable(
            VotableType.DEFINITION, definition.id
        ) == 1

    @pytest.mark.asyncio
    async def test_score_invariant_holds_across_many_voters(self, unit_env):
        """score == up - down after an arbitrary mix of votes."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        definition_repo = await unit_env.get(DefinitionRepository)
        definition = await _definition(unit_env)
        sequence = [
            ("a", "up"), ("b", "down"), ("a", "down"), ("c", "up"),
            ("b", "down"), ("d", "up"), ("c", "up"), ("e", "down"),
        ]

        # Act
        for voter, direction in sequence:
            await vote_service.cast_vote(
                UserId(voter), VotableType.DEFINITION, definition.id, direction
            )

        # Assert - a:down, b:none, c:none, d:up, e:down
        stored = await definition_repo.find_by_id(definition.id)
        assert (stored.votes.up, stored.votes.down) == (1, 2)
        assert stored.votes.score == stored.votes.up - stored.votes.down

    @pytest.mark.asyncio
    async def test_votes_are_counted_towards_votes_given(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        user = await seed_user(user_repo)
        definition = await _definition(unit_env)

        # Act
        await vote_service.cast_vote(user.id, VotableType.DEFINITION, definition.id, "up")
        await vote_service.cast_vote(user.id, VotableType.DEFINITION, definition.id, "up")

        # Assert - retraction is a vote action too
        stored = await user_repo.find_by_id(user.id)
        assert stored.contributions.votes_given == 2

    @pytest.mark.asyncio
    async def test_missing_item_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.cast_vote(
                UserId("voter"), VotableType.COMMENT, uuid4(), VoteType.UP
            )

    @pytest.mark.asyncio
    async def test_unknown_polarity_raises_validation_error(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        definition = await _definition(unit_env)

        with pytest.raises(ValidationError, match="Unknown vote type"):
            await vote_service.cast_vote(
                UserId("voter"), VotableType.DEFINITION, definition.id, "sideways"
            )

    @pytest.mark.asyncio
    async def test_anonymous_vote_is_rejected(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(UnauthenticatedError):
            await vote_service.cast_vote(None, VotableType.DEFINITION, uuid4(), "up")


class _RacingVoteRepository(InMemoryVoteRepository):
    """Simulates another request inserting the same vote just before ours."""

    def __init__(self, racing_type: VoteType) -> None:
        super().__init__()
        self.racing_type = racing_type
        self.raced = False

    async def save(self, vote: Vote) -> Vote:
        if not self.raced:
            self.raced = True
            winner = vote.model_copy(
                update={"id": VoteId(uuid4()), "vote_type": self.racing_type}
            )
            await super().save(winner)
            raise IntegrityError("insert into votes", {}, Exception("unique_vote"))
        return await super().save(vote)


class TestConcurrentCreate:
    """A uniqueness violation on insert is retried as an update."""

    @pytest.mark.asyncio
    async def test_lost_race_with_opposite_vote_becomes_flip(self, unit_env):
        # Arrange
        definition = await _definition(unit_env)
        vote_repo = _RacingVoteRepository(racing_type=VoteType.DOWN)
        vote_service = VoteService(
            vote_repository=vote_repo,
            score_service=await unit_env.get(ScoreService),
            user_service=await unit_env.get(UserService),
        )

        # Act
        outcome = await vote_service.cast_vote(
            UserId("voter"), VotableType.DEFINITION, definition.id, VoteType.UP
        )

        # Assert
        stored = await vote_repo.find_by_user_and_votable(
            UserId("voter"), VotableType.DEFINITION, definition.id
        )
        assert outcome.transition.action == VoteAction.FLIPPED
        assert stored.vote_type == VoteType.UP
        assert await vote_repo.count_by_votable(
            VotableType.DEFINITION, definition.id
        ) == 1


class TestGetUserVotes:
    @pytest.mark.asyncio
    async def test_maps_only_voted_items(self, unit_env):
        # Arrange
        vote_service = await unit_env.get(VoteService)
        voted = await _definition(unit_env)
        voter = UserId("voter")
        await vote_service.cast_vote(voter, VotableType.DEFINITION, voted.id, "down")

        # Act
        votes = await vote_service.get_user_votes(
            voter, VotableType.DEFINITION, [voted.id, uuid4()]
        )

        # Assert
        assert votes == {voted.id: VoteType.DOWN}
