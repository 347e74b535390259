"""Unit tests for GetTrendingUseCase."""

import pytest

from jerga.application.usecase.discovery import GetTrendingRequest, GetTrendingUseCase
from jerga.domain.repository import DefinitionRepository, TermRepository
from jerga.domain.value import Region, TrendingKind, TrendingPeriod, VoteCounters
from tests.conftest import seed_definition, seed_term
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_upvoted(unit_env, words, region=Region.GENERAL):
    term_repo = await unit_env.get(TermRepository)
    definition_repo = await unit_env.get(DefinitionRepository)
    for word in words:
        term = await seed_term(term_repo, word=word, region=region)
        await seed_definition(definition_repo, term, votes=VoteCounters(up=3, down=0))


class TestGetTrendingUseCase:
    @pytest.mark.asyncio
    async def test_both_returns_terms_and_definitions(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetTrendingUseCase)
        await _seed_upvoted(unit_env, ["chamba", "pana"])

        # Act
        response = await use_case.execute(GetTrendingRequest())

        # Assert
        assert response.period == TrendingPeriod.WEEK
        assert response.window_start < response.window_end
        assert {t.term.word for t in response.terms} == {"chamba", "pana"}
        assert len(response.definitions) == 2

    @pytest.mark.asyncio
    async def test_single_kind_leaves_other_list_empty(self, unit_env):
        use_case = await unit_env.get(GetTrendingUseCase)
        await _seed_upvoted(unit_env, ["chamba"])

        response = await use_case.execute(
            GetTrendingRequest(kind=TrendingKind.DEFINITIONS)
        )

        assert response.terms is None
        assert len(response.definitions) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("requested, expected", [(0, 1), (-5, 1), (2, 2)])
    async def test_limit_is_clamped(self, unit_env, requested, expected):
        # Arrange
        use_case = await unit_env.get(GetTrendingUseCase)
        await _seed_upvoted(unit_env, ["chamba", "pana", "guagua"])

        # Act
        response = await use_case.execute(GetTrendingRequest(limit=requested))

        # Assert
        assert len(response.terms) == expected
        assert len(response.definitions) == expected

    @pytest.mark.asyncio
    async def test_limit_above_maximum_is_capped(self, unit_env):
        use_case = await unit_env.get(GetTrendingUseCase)
        max_limit = use_case.trending_service.ranking.max_limit
        await _seed_upvoted(unit_env, [f"palabra{i}" for i in range(max_limit + 2)])

        response = await use_case.execute(GetTrendingRequest(limit=500))

        assert len(response.terms) == max_limit
        assert len(response.definitions) == max_limit

    @pytest.mark.asyncio
    async def test_region_filter(self, unit_env):
        use_case = await unit_env.get(GetTrendingUseCase)
        await _seed_upvoted(unit_env, ["chamba"], region=Region.MEXICO)
        await _seed_upvoted(unit_env, ["guay"], region=Region.SPAIN)

        response = await use_case.execute(GetTrendingRequest(region=Region.SPAIN))

        assert [t.term.word for t in response.terms] == ["guay"]
        assert [d.region for d in response.definitions] == [Region.SPAIN]
