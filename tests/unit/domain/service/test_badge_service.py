"""Unit tests for BadgeService."""

import pytest

from jerga.domain.error import NotFoundError
from jerga.domain.repository import NotificationRepository, UserRepository
from jerga.domain.service import BadgeService, NotificationService
from jerga.domain.value import ContributionCounters, NotificationType, UserId
from tests.conftest import make_user, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class _FailingNotificationService(NotificationService):
    async def emit(self, *args, **kwargs):
        raise RuntimeError("notification store unavailable")


class TestEvaluate:
    """Tests for evaluate."""

    @pytest.mark.asyncio
    async def test_awards_in_catalog_order_and_notifies(self, unit_env):
        # Arrange
        badge_service = await unit_env.get(BadgeService)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        user = await seed_user(
            user_repo,
            contributions=ContributionCounters(terms_submitted=10, votes_given=50),
        )

        # Act
        awarded = await badge_service.evaluate(user.id)

        # Assert
        assert awarded == ["newbie", "contributor", "active_voter"]
        notifications = await notification_repo.find_by_user(user.id, limit=10)
        assert len(notifications) == 3
        assert all(n.type == NotificationType.BADGE_EARNED for n in notifications)

    @pytest.mark.asyncio
    async def test_second_evaluation_awards_nothing(self, unit_env):
        # Arrange
        badge_service = await unit_env.get(BadgeService)
        user = await seed_user(
            await unit_env.get(UserRepository),
            contributions=ContributionCounters(terms_submitted=1),
        )
        await badge_service.evaluate(user.id)

        # Act
        awarded = await badge_service.evaluate(user.id)

        # Assert
        assert awarded == []

    @pytest.mark.asyncio
    async def test_held_badges_are_never_removed(self, unit_env):
        """A badge whose criteria no longer hold stays on the user."""
        # Arrange
        badge_service = await unit_env.get(BadgeService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(
            make_user().model_copy(update={"badges": ["contributor"]})
        )

        # Act
        await badge_service.evaluate(user.id)

        # Assert
        stored = await user_repo.find_by_id(user.id)
        assert "contributor" in stored.badges

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_block_award(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        badge_service = BadgeService(
            user_repository=user_repo,
            notification_service=_FailingNotificationService(
                await unit_env.get(NotificationRepository)
            ),
        )
        user = await seed_user(
            user_repo, contributions=ContributionCounters(terms_submitted=10)
        )

        # Act
        awarded = await badge_service.evaluate(user.id)

        # Assert
        assert awarded == ["newbie", "contributor"]
        assert (await user_repo.find_by_id(user.id)).badges == ["newbie", "contributor"]

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        badge_service = await unit_env.get(BadgeService)

        with pytest.raises(NotFoundError):
            await badge_service.evaluate(UserId("ghost"))


class TestGetProgress:
    @pytest.mark.asyncio
    async def test_lists_next_three_unearned_badges(self, unit_env):
        # Arrange
        badge_service = await unit_env.get(BadgeService)
        user_repo = await unit_env.get(UserRepository)
        user = await seed_user(
            user_repo, contributions=ContributionCounters(terms_submitted=5)
        )
        await badge_service.evaluate(user.id)

        # Act
        progress = await badge_service.get_progress(user.id)

        # Assert
        assert [b.id for b in progress.earned] == ["newbie"]
        assert [b.id for b in progress.next] == [
            "contributor",
            "active_voter",
            "definition_master",
        ]
        assert progress.progress["contributor"] == 50.0
        assert progress.progress["active_voter"] == 0.0
