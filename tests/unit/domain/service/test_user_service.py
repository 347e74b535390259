"""Unit tests for UserService."""

import pytest

from jerga.domain.error import NotFoundError
from jerga.domain.service import UserService
from jerga.domain.value import (
    ContributionCounters,
    ContributionType,
    LeaderboardField,
    UserId,
)
from jerga.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_user


class TestIncrementContribution:
    """Tests for UserService.increment_contribution()."""

    @pytest.mark.asyncio
    async def test_increments_only_named_counter(self):
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)
        user = await user_repo.save(make_user("ana"))

        # Act
        await service.increment_contribution(user.id, ContributionType.VOTES_GIVEN)
        await service.increment_contribution(user.id, ContributionType.VOTES_GIVEN)

        # Assert
        stored = await service.get_by_id(user.id)
        assert stored.contributions == ContributionCounters(votes_given=2)

    @pytest.mark.asyncio
    async def test_unknown_user_is_ignored(self):
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)

        await service.increment_contribution(
            UserId("ghost"), ContributionType.TERMS_SUBMITTED
        )

        assert await service.find_by_id(UserId("ghost")) is None


class TestGetById:
    @pytest.mark.asyncio
    async def test_missing_user_raises(self):
        service = UserService(InMemoryUserRepository())

        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId("ghost"))


class TestLeaderboard:
    """Tests for UserService.get_leaderboard()."""

    @pytest.mark.asyncio
    async def test_sorts_by_requested_field(self):
        # Arrange
        user_repo = InMemoryUserRepository()
        service = UserService(user_repo)
        await user_repo.save(
            make_user("ana", contributions=ContributionCounters(terms_submitted=3))
        )
        await user_repo.save(
            make_user("luis", contributions=ContributionCounters(votes_given=40))
        )
        await user_repo.save(
            make_user("eva", contributions=ContributionCounters(terms_submitted=7))
        )

        # Act
        by_terms = await service.get_leaderboard(LeaderboardField.TERMS_SUBMITTED, 2)
        by_votes = await service.get_leaderboard(LeaderboardField.VOTES_GIVEN, 1)

        # Assert
        assert [u.id for u in by_terms] == ["eva", "ana"]
        assert [u.id for u in by_votes] == ["luis"]
