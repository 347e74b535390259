"""Unit tests for the flag moderation use cases."""

import pytest

from jerga.application.usecase.flag import (
    CreateFlagRequest,
    CreateFlagUseCase,
    ListFlagsRequest,
    ListFlagsUseCase,
    ReviewFlagRequest,
    ReviewFlagUseCase,
)
from jerga.domain.error import NotAuthorizedError, NotFoundError, UnauthenticatedError
from jerga.domain.repository import TermRepository, UserRepository
from jerga.domain.value import FlagReason, FlagStatus, FlagTargetType, UserRole
from tests.conftest import seed_term, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _reported_term(unit_env):
    term = await seed_term(await unit_env.get(TermRepository))
    create_flag = await unit_env.get(CreateFlagUseCase)
    return await create_flag.execute(
        CreateFlagRequest(
            target_type=FlagTargetType.TERM,
            target_id=term.id,
            reason=FlagReason.MISINFORMATION,
            user_id="reporter",
        )
    )


class TestListFlags:
    @pytest.mark.asyncio
    async def test_moderator_sees_pending_queue(self, unit_env):
        # Arrange
        await seed_user(
            await unit_env.get(UserRepository), user_id="mod", role=UserRole.MODERATOR
        )
        flag = await _reported_term(unit_env)
        use_case = await unit_env.get(ListFlagsUseCase)

        # Act
        response = await use_case.execute(ListFlagsRequest(user_id="mod"))

        # Assert
        assert response.total == 1
        assert response.flags[0].flag_id == flag.flag_id

    @pytest.mark.asyncio
    async def test_regular_user_is_not_authorized(self, unit_env):
        await seed_user(await unit_env.get(UserRepository), user_id="ana")
        use_case = await unit_env.get(ListFlagsUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(ListFlagsRequest(user_id="ana"))

    @pytest.mark.asyncio
    async def test_unsynced_user_is_not_found(self, unit_env):
        use_case = await unit_env.get(ListFlagsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListFlagsRequest(user_id="ghost"))

    @pytest.mark.asyncio
    async def test_anonymous_is_unauthenticated(self, unit_env):
        use_case = await unit_env.get(ListFlagsUseCase)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(ListFlagsRequest(user_id=None))


class TestReviewFlag:
    @pytest.mark.asyncio
    async def test_admin_resolves_flag(self, unit_env):
        # Arrange
        await seed_user(
            await unit_env.get(UserRepository), user_id="boss", role=UserRole.ADMIN
        )
        flag = await _reported_term(unit_env)
        use_case = await unit_env.get(ReviewFlagUseCase)

        # Act
        reviewed = await use_case.execute(
            ReviewFlagRequest(
                flag_id=flag.flag_id,
                status=FlagStatus.RESOLVED,
                moderator_notes="Definición corregida",
                user_id="boss",
            )
        )

        # Assert
        assert reviewed.status == FlagStatus.RESOLVED
        assert reviewed.moderator_id == "boss"
        assert reviewed.moderator_notes == "Definición corregida"

    @pytest.mark.asyncio
    async def test_regular_user_cannot_review(self, unit_env):
        await seed_user(await unit_env.get(UserRepository), user_id="ana")
        flag = await _reported_term(unit_env)
        use_case = await unit_env.get(ReviewFlagUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                ReviewFlagRequest(
                    flag_id=flag.flag_id, status=FlagStatus.DISMISSED, user_id="ana"
                )
            )
