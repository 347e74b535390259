"""Unit tests for FlagService."""

from uuid import uuid4

import pytest

from jerga.domain.error import DuplicateFlagError, NotFoundError, ValidationError
from jerga.domain.repository import DefinitionRepository, TermRepository
from jerga.domain.service import FlagService
from jerga.domain.value import (
    FlagId,
    FlagReason,
    FlagStatus,
    FlagTargetType,
    UserId,
)
from tests.conftest import seed_definition, seed_term
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateFlag:
    """Tests for create_flag."""

    @pytest.mark.asyncio
    async def test_creates_pending_flag(self, unit_env):
        # Arrange
        flag_service = await unit_env.get(FlagService)
        term = await seed_term(await unit_env.get(TermRepository))

        # Act
        flag = await flag_service.create_flag(
            UserId("reporter"), FlagTargetType.TERM, term.id, FlagReason.SPAM
        )

        # Assert
        assert flag.status == FlagStatus.PENDING
        assert flag.target_id == term.id

    @pytest.mark.asyncio
    async def test_duplicate_open_flag_is_rejected(self, unit_env):
        # Arrange
        flag_service = await unit_env.get(FlagService)
        term = await seed_term(await unit_env.get(TermRepository))
        definition = await seed_definition(
            await unit_env.get(DefinitionRepository), term
        )
        await flag_service.create_flag(
            UserId("reporter"), FlagTargetType.DEFINITION, definition.id, FlagReason.SPAM
        )

        # Act & Assert
        with pytest.raises(DuplicateFlagError):
            await flag_service.create_flag(
                UserId("reporter"),
                FlagTargetType.DEFINITION,
                definition.id,
                FlagReason.HARASSMENT,
            )

    @pytest.mark.asyncio
    async def test_closed_flag_allows_new_report(self, unit_env):
        # Arrange
        flag_service = await unit_env.get(FlagService)
        term = await seed_term(await unit_env.get(TermRepository))
        first = await flag_service.create_flag(
            UserId("reporter"), FlagTargetType.TERM, term.id, FlagReason.SPAM
        )
        await flag_service.review_flag(first.id, FlagStatus.DISMISSED, UserId("mod"))

        # Act
        second = await flag_service.create_flag(
            UserId("reporter"), FlagTargetType.TERM, term.id, FlagReason.SPAM
        )

        # Assert
        assert second.id != first.id

    @pytest.mark.asyncio
    async def test_other_reason_requires_text(self, unit_env):
        flag_service = await unit_env.get(FlagService)
        term = await seed_term(await unit_env.get(TermRepository))

        with pytest.raises(ValidationError):
            await flag_service.create_flag(
                UserId("reporter"), FlagTargetType.TERM, term.id, FlagReason.OTHER, "  "
            )

    @pytest.mark.asyncio
    async def test_missing_target_raises_not_found(self, unit_env):
        flag_service = await unit_env.get(FlagService)

        with pytest.raises(NotFoundError):
            await flag_service.create_flag(
                UserId("reporter"), FlagTargetType.COMMENT, uuid4(), FlagReason.SPAM
            )


class TestReviewFlag:
    @pytest.mark.asyncio
    async def test_records_moderator_decision(self, unit_env):
        # Arrange
        flag_service = await unit_env.get(FlagService)
        term = await seed_term(await unit_env.get(TermRepository))
        flag = await flag_service.create_flag(
            UserId("reporter"), FlagTargetType.TERM, term.id, FlagReason.SPAM
        )

        # Act
        reviewed = await flag_service.review_flag(
            flag.id, FlagStatus.RESOLVED, UserId("mod"), "Eliminado"
        )

        # Assert
        assert reviewed.status == FlagStatus.RESOLVED
        assert reviewed.moderator_id == "mod"
        assert reviewed.reviewed_at is not None
        assert await flag_service.list_flags(FlagStatus.PENDING) == []

    @pytest.mark.asyncio
    async def test_unknown_flag_raises_not_found(self, unit_env):
        flag_service = await unit_env.get(FlagService)

        with pytest.raises(NotFoundError):
            await flag_service.review_flag(
                FlagId(uuid4()), FlagStatus.RESOLVED, UserId("mod")
            )
