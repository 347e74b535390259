"""Unit tests for CastVoteUseCase."""

from uuid import uuid4

import pytest

from jerga.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from jerga.config import RateLimitSettings
from jerga.domain.error import RateLimitedError, UnauthenticatedError
from jerga.domain.model import VoteAction
from jerga.domain.repository import (
    DefinitionRepository,
    NotificationRepository,
    TermRepository,
    UserRepository,
)
from jerga.domain.service import (
    BadgeService,
    NotificationService,
    RateLimiter,
    ReputationService,
    VoteService,
)
from jerga.domain.value import NotificationType, UserId, VotableType, VoteType
from tests.conftest import seed_definition, seed_term, seed_user
from tests.di import FrozenClock
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _use_case(unit_env, max_actions: int = 10) -> CastVoteUseCase:
    return CastVoteUseCase(
        rate_limiter=RateLimiter(
            RateLimitSettings(window_seconds=60, max_actions=max_actions)
        ),
        vote_service=await unit_env.get(VoteService),
        reputation_service=await unit_env.get(ReputationService),
        badge_service=await unit_env.get(BadgeService),
        notification_service=await unit_env.get(NotificationService),
    )


async def _definition(unit_env, author_id: str = "author"):
    term = await seed_term(
        await unit_env.get(TermRepository),
        word=f"palabra-{uuid4().hex[:8]}",
        author_id=author_id,
    )
    return await seed_definition(
        await unit_env.get(DefinitionRepository), term, author_id=author_id
    )


class TestCastVoteUseCase:
    """Tests for the full vote flow."""

    @pytest.mark.asyncio
    async def test_upvote_updates_counters_and_voter_standing(self, unit_env):
        # Arrange
        use_case = await _use_case(unit_env)
        user_repo = await unit_env.get(UserRepository)
        voter = await seed_user(user_repo, user_id="voter")
        definition = await _definition(unit_env)

        # Act
        response = await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.DEFINITION,
                votable_id=definition.id,
                vote_type="up",
                user_id=voter.id,
            )
        )

        # Assert
        assert response.action == VoteAction.CREATED
        assert response.user_vote == VoteType.UP
        assert (response.votes.up, response.votes.down, response.votes.score) == (
            1,
            0,
            1,
        )
        assert response.rate_limit.remaining == 9

        refreshed = await user_repo.find_by_id(voter.id)
        assert refreshed.contributions.votes_given == 1
        assert refreshed.reputation == 1
        assert refreshed.badges == []

    @pytest.mark.asyncio
    async def test_upvote_notifies_author(self, unit_env):
        # Arrange
        use_case = await _use_case(unit_env)
        await seed_user(await unit_env.get(UserRepository), user_id="voter")
        definition = await _definition(unit_env, author_id="autora")

        # Act
        await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.DEFINITION,
                votable_id=definition.id,
                vote_type="up",
                user_id="voter",
            )
        )

        # Assert
        notification_repo = await unit_env.get(NotificationRepository)
        notices = await notification_repo.find_by_user(
            UserId("autora"), unread_only=True, limit=10
        )
        assert [n.type for n in notices] == [NotificationType.VOTE]
        assert notices[0].related_id == str(definition.id)

    @pytest.mark.asyncio
    async def test_downvote_and_self_vote_send_no_notification(self, unit_env):
        # Arrange
        use_case = await _use_case(unit_env)
        await seed_user(await unit_env.get(UserRepository), user_id="autora")
        definition = await _definition(unit_env, author_id="autora")
        other = await _definition(unit_env, author_id="otro")

        # Act
        await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.DEFINITION,
                votable_id=definition.id,
                vote_type="up",
                user_id="autora",
            )
        )
        await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.DEFINITION,
                votable_id=other.id,
                vote_type="down",
                user_id="autora",
            )
        )

        # Assert
        notification_repo = await unit_env.get(NotificationRepository)
        for recipient in ("autora", "otro"):
            notices = await notification_repo.find_by_user(
                UserId(recipient), unread_only=False, limit=10
            )
            assert notices == []

    @pytest.mark.asyncio
    async def test_unsynced_voter_still_votes(self, unit_env):
        use_case = await _use_case(unit_env)
        definition = await _definition(unit_env)

        response = await use_case.execute(
            CastVoteRequest(
                votable_type=VotableType.DEFINITION,
                votable_id=definition.id,
                vote_type="down",
                user_id="ghost",
            )
        )

        assert response.votes.down == 1
        assert response.votes.score == -1

    @pytest.mark.asyncio
    async def test_rate_limited_caller_is_rejected(self, unit_env):
        # Arrange
        use_case = await _use_case(unit_env, max_actions=1)
        definition = await _definition(unit_env)
        request = CastVoteRequest(
            votable_type=VotableType.DEFINITION,
            votable_id=definition.id,
            vote_type="up",
            user_id="voter",
        )
        await use_case.execute(request)

        # Act & Assert
        with pytest.raises(RateLimitedError) as exc_info:
            await use_case.execute(request)
        assert exc_info.value.reset_at is not None

        # The rejected call left the ledger untouched
        definition_repo = await unit_env.get(DefinitionRepository)
        stored = await definition_repo.find_by_id(definition.id)
        assert stored.votes.up == 1

    @pytest.mark.asyncio
    async def test_requires_authentication(self, unit_env):
        use_case = await _use_case(unit_env)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(
                CastVoteRequest(
                    votable_type=VotableType.DEFINITION,
                    votable_id=uuid4(),
                    vote_type="up",
                    user_id=None,
                )
            )


class TestCastVoteRateWindow:
    """The container's shared limiter, driven by the frozen test clock."""

    @pytest.mark.asyncio
    async def test_quota_returns_after_window(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CastVoteUseCase)
        clock = await unit_env.get(FrozenClock)
        definition = await _definition(unit_env)
        request = CastVoteRequest(
            votable_type=VotableType.DEFINITION,
            votable_id=definition.id,
            vote_type="up",
            user_id="voter",
        )
        for _ in range(10):
            await use_case.execute(request)

        # Act & Assert
        with pytest.raises(RateLimitedError):
            await use_case.execute(request)

        clock.advance(61)
        response = await use_case.execute(request)
        assert response.rate_limit.remaining == 9
