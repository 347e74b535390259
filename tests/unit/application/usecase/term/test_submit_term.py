"""Unit tests for SubmitTermUseCase."""

import pytest

from jerga.application.usecase.term import SubmitTermRequest, SubmitTermUseCase
from jerga.domain.error import UnauthenticatedError
from jerga.domain.repository import NotificationRepository, UserRepository
from jerga.domain.value import NotificationType, Region, UserId, Word
from tests.conftest import seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _request(user_id: str | None, word: str = "guagua") -> SubmitTermRequest:
    return SubmitTermRequest(
        word=Word(word),
        region=Region.CUBA,
        definition="Autobús de transporte público.",
        example="Me monté en la guagua para ir al trabajo.",
        tags=["transporte"],
        user_id=user_id,
    )


class TestSubmitTermUseCase:
    """Tests for contribution accounting on submission."""

    @pytest.mark.asyncio
    async def test_new_term_counts_term_and_definition(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SubmitTermUseCase)
        user_repo = await unit_env.get(UserRepository)
        await seed_user(user_repo, user_id="ana")

        # Act
        response = await use_case.execute(_request("ana"))

        # Assert
        assert response.is_new_term
        assert response.term.word == "guagua"
        assert response.definition.votes.score == 0

        user = await user_repo.find_by_id(UserId("ana"))
        assert user.contributions.terms_submitted == 1
        assert user.contributions.definitions_submitted == 1
        assert user.reputation == 18
        assert user.badges == ["newbie"]

    @pytest.mark.asyncio
    async def test_existing_term_counts_only_definition(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SubmitTermUseCase)
        user_repo = await unit_env.get(UserRepository)
        await seed_user(user_repo, user_id="ana")
        await seed_user(user_repo, user_id="luis")
        first = await use_case.execute(_request("ana"))

        # Act
        second = await use_case.execute(_request("luis", word="GUAGUA"))

        # Assert
        assert not second.is_new_term
        assert second.term.term_id == first.term.term_id

        luis = await user_repo.find_by_id(UserId("luis"))
        assert luis.contributions.terms_submitted == 0
        assert luis.contributions.definitions_submitted == 1
        assert luis.reputation == 8
        assert luis.badges == []

    @pytest.mark.asyncio
    async def test_first_term_awards_newbie_notification(self, unit_env):
        use_case = await unit_env.get(SubmitTermUseCase)
        await seed_user(await unit_env.get(UserRepository), user_id="ana")

        await use_case.execute(_request("ana"))

        notification_repo = await unit_env.get(NotificationRepository)
        notices = await notification_repo.find_by_user(UserId("ana"))
        assert [n.type for n in notices] == [NotificationType.BADGE_EARNED]

    @pytest.mark.asyncio
    async def test_requires_authentication(self, unit_env):
        use_case = await unit_env.get(SubmitTermUseCase)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(_request(None))
