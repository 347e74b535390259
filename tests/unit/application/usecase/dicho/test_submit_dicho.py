"""Unit tests for SubmitDichoUseCase."""

from uuid import uuid4

import pytest

from jerga.application.usecase.dicho import SubmitDichoRequest, SubmitDichoUseCase
from jerga.domain.error import NotFoundError, UnauthenticatedError
from jerga.domain.repository import TermRepository, UserRepository
from jerga.domain.value import Region, UserId
from tests.conftest import seed_term, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSubmitDichoUseCase:
    @pytest.mark.asyncio
    async def test_dicho_counts_for_author(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SubmitDichoUseCase)
        user_repo = await unit_env.get(UserRepository)
        await seed_user(user_repo, user_id="marta")
        term = await seed_term(await unit_env.get(TermRepository), word="chamba")

        # Act
        response = await use_case.execute(
            SubmitDichoRequest(
                term_id=term.id,
                content="El que no chambea, no come.",
                translation="He who does not work does not eat.",
                region=Region.MEXICO,
                user_id="marta",
            )
        )

        # Assert
        assert response.term_id == str(term.id)
        assert response.region == Region.MEXICO
        assert response.votes.score == 0

        user = await user_repo.find_by_id(UserId("marta"))
        assert user.contributions.dichos_submitted == 1
        assert user.reputation == 5

    @pytest.mark.asyncio
    async def test_missing_term_raises_not_found(self, unit_env):
        use_case = await unit_env.get(SubmitDichoUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                SubmitDichoRequest(
                    term_id=uuid4(), content="Dicho huérfano.", user_id="marta"
                )
            )

    @pytest.mark.asyncio
    async def test_anonymous_submission_is_rejected(self, unit_env):
        use_case = await unit_env.get(SubmitDichoUseCase)
        term = await seed_term(await unit_env.get(TermRepository))

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(
                SubmitDichoRequest(term_id=term.id, content="Sin firma.", user_id=None)
            )
