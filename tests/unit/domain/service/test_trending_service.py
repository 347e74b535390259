"""Unit tests for TrendingService and window_for_period."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from jerga.config import RankingSettings
from jerga.domain.model import TermActivity
from jerga.domain.repository import DefinitionRepository, TermRepository
from jerga.domain.service import TrendingService, window_for_period
from jerga.domain.value import Region, TermId, TrendingPeriod, VoteCounters
from tests.conftest import seed_definition, seed_term
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

NOW = datetime(2025, 3, 31, 12, 0, tzinfo=timezone.utc)


class TestWindowForPeriod:
    def test_day_and_week(self):
        assert window_for_period(TrendingPeriod.DAY, NOW) == (
            NOW - timedelta(days=1),
            NOW,
        )
        assert window_for_period(TrendingPeriod.WEEK, NOW)[0] == NOW - timedelta(days=7)

    def test_month_clamps_to_shorter_month(self):
        start, _ = window_for_period(TrendingPeriod.MONTH, NOW)
        assert start == datetime(2025, 2, 28, 12, 0, tzinfo=timezone.utc)

    def test_month_wraps_year(self):
        now = datetime(2025, 1, 15, tzinfo=timezone.utc)
        start, _ = window_for_period(TrendingPeriod.MONTH, now)
        assert start == datetime(2024, 12, 15, tzinfo=timezone.utc)

    def test_all_starts_at_fixed_epoch(self):
        start, end = window_for_period(TrendingPeriod.ALL, NOW)
        assert start == datetime(2020, 1, 1, tzinfo=timezone.utc)
        assert end == NOW


def test_trending_score_formula():
    service = TrendingService(None, None, RankingSettings())  # type: ignore[arg-type]
    window_start = NOW - timedelta(days=7)
    activity = TermActivity(
        term_id=TermId(uuid4()),
        definition_count=3,
        total_vote_score=4,
        latest_activity=window_start + timedelta(days=2),
    )

    # 2.0 * 3 + 0.5 * 4 + 1.0 * 2 days
    assert service.trending_score(activity, window_start) == pytest.approx(10.0)


class TestRankTerms:
    """Tests for rank_terms."""

    @pytest.mark.asyncio
    async def test_orders_by_score(self, unit_env):
        # Arrange
        service = await unit_env.get(TrendingService)
        term_repo = await unit_env.get(TermRepository)
        definition_repo = await unit_env.get(DefinitionRepository)
        quiet = await seed_term(term_repo, word="quiet")
        busy = await seed_term(term_repo, word="busy")
        await seed_definition(definition_repo, quiet)
        for _ in range(3):
            await seed_definition(
                definition_repo, busy, votes=VoteCounters(up=2, down=0)
            )
        start, end = window_for_period(TrendingPeriod.WEEK, datetime.now(timezone.utc))

        # Act
        ranked = await service.rank_terms(start, end)

        # Assert
        assert [t.term.id for t in ranked] == [busy.id, quiet.id]
        assert ranked[0].definition_count == 3
        assert ranked[0].total_vote_score == 6

    @pytest.mark.asyncio
    async def test_equal_scores_prefer_latest_activity(self, unit_env):
        # Arrange - recency weight off so both terms score the same
        term_repo = await unit_env.get(TermRepository)
        definition_repo = await unit_env.get(DefinitionRepository)
        service = TrendingService(
            term_repository=term_repo,
            definition_repository=definition_repo,
            ranking_settings=RankingSettings(recency_weight=0.0),
        )
        older = await seed_term(term_repo, word="older")
        newer = await seed_term(term_repo, word="newer")
        await seed_definition(definition_repo, older, created_at=NOW - timedelta(hours=5))
        await seed_definition(definition_repo, newer, created_at=NOW - timedelta(hours=1))

        # Act
        ranked = await service.rank_terms(NOW - timedelta(days=1), NOW)

        # Assert
        assert ranked[0].trending_score == ranked[1].trending_score
        assert [t.term.id for t in ranked] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_inactive_terms_and_old_definitions_are_excluded(self, unit_env):
        # Arrange
        service = await unit_env.get(TrendingService)
        term_repo = await unit_env.get(TermRepository)
        definition_repo = await unit_env.get(DefinitionRepository)
        hidden = await seed_term(term_repo, word="hidden", is_active=False)
        stale = await seed_term(term_repo, word="stale")
        fresh = await seed_term(term_repo, word="fresh")
        await seed_definition(definition_repo, hidden, created_at=NOW)
        await seed_definition(
            definition_repo, stale, created_at=NOW - timedelta(days=30)
        )
        await seed_definition(definition_repo, fresh, created_at=NOW)

        # Act
        ranked = await service.rank_terms(NOW - timedelta(days=7), NOW)

        # Assert
        assert [t.term.id for t in ranked] == [fresh.id]

    @pytest.mark.asyncio
    async def test_limit_and_region(self, unit_env):
        # Arrange
        service = await unit_env.get(TrendingService)
        term_repo = await unit_env.get(TermRepository)
        definition_repo = await unit_env.get(DefinitionRepository)
        for word in ("uno", "dos", "tres"):
            term = await seed_term(term_repo, word=word, region=Region.CHILE)
            await seed_definition(definition_repo, term, created_at=NOW)
        other = await seed_term(term_repo, word="otro", region=Region.PERU)
        await seed_definition(definition_repo, other, created_at=NOW)

        # Act
        ranked = await service.rank_terms(
            NOW - timedelta(days=1), NOW, region=Region.CHILE, limit=2
        )

        # Assert
        assert len(ranked) == 2
        assert all(t.term.region == Region.CHILE for t in ranked)


class TestRankDefinitions:
    @pytest.mark.asyncio
    async def test_only_positive_scores_best_first(self, unit_env):
        # Arrange
        service = await unit_env.get(TrendingService)
        term = await seed_term(await unit_env.get(TermRepository))
        definition_repo = await unit_env.get(DefinitionRepository)
        good = await seed_definition(
            definition_repo, term, created_at=NOW, votes=VoteCounters(up=3)
        )
        better = await seed_definition(
            definition_repo, term, created_at=NOW, votes=VoteCounters(up=5)
        )
        await seed_definition(
            definition_repo, term, created_at=NOW, votes=VoteCounters(up=1, down=1)
        )

        # Act
        ranked = await service.rank_definitions(NOW - timedelta(days=1), NOW)

        # Assert
        assert [d.id for d in ranked] == [better.id, good.id]
