"""Unit tests for WordOfDayService."""

from datetime import date, datetime, timedelta, timezone

import pytest

from jerga.domain.error import NotFoundError
from jerga.domain.repository import DefinitionRepository, TermRepository
from jerga.domain.service import WordOfDayService, date_seed
from jerga.domain.value import Region, VoteCounters
from tests.conftest import seed_definition, seed_term
from tests.di import FrozenClock
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

WORDS = ["chévere", "guay", "bacán", "padre", "copado"]


def test_date_seed_is_yyyymmdd():
    assert date_seed(date(2024, 3, 7)) == 20240307


async def _seed_defined_terms(unit_env, words=WORDS, region=Region.GENERAL):
    term_repo = await unit_env.get(TermRepository)
    definition_repo = await unit_env.get(DefinitionRepository)
    terms = []
    for word in words:
        term = await seed_term(term_repo, word=word, region=region)
        await seed_definition(definition_repo, term)
        terms.append(term)
    return terms


class TestSelectForDate:
    """Tests for select_for_date."""

    @pytest.mark.asyncio
    async def test_same_date_gives_same_term(self, unit_env):
        # Arrange
        service = await unit_env.get(WordOfDayService)
        await _seed_defined_terms(unit_env)
        day = date(2025, 6, 14)

        # Act
        first = await service.select_for_date(day)
        second = await service.select_for_date(day)

        # Assert
        assert first.term.id == second.term.id
        assert first.seed == 20250614

    @pytest.mark.asyncio
    async def test_defaults_to_clock_date(self, unit_env):
        # Arrange
        service = await unit_env.get(WordOfDayService)
        clock = await unit_env.get(FrozenClock)
        await _seed_defined_terms(unit_env)
        clock.now = datetime(2025, 6, 14, 23, 59, tzinfo=timezone.utc)

        # Act
        result = await service.select_for_date()

        # Assert
        assert result.seed == 20250614
        explicit = await service.select_for_date(date(2025, 6, 14))
        assert result.term.id == explicit.term.id

    @pytest.mark.asyncio
    async def test_consecutive_days_cover_every_term(self, unit_env):
        """N consecutive seeds cover every residue mod N."""
        # Arrange
        service = await unit_env.get(WordOfDayService)
        terms = await _seed_defined_terms(unit_env)
        start = date(2025, 3, 1)

        # Act
        selected = {
            (await service.select_for_date(start + timedelta(days=i))).term.id
            for i in range(len(terms))
        }

        # Assert
        assert selected == {term.id for term in terms}

    @pytest.mark.asyncio
    async def test_single_eligible_term_is_always_selected(self, unit_env):
        # Arrange
        service = await unit_env.get(WordOfDayService)
        (only,) = await _seed_defined_terms(unit_env, words=["pana"])

        # Act
        results = [
            await service.select_for_date(date(2025, 1, 1) + timedelta(days=i))
            for i in range(3)
        ]

        # Assert
        assert all(r.term.id == only.id for r in results)
        assert all(r.eligible_count == 1 for r in results)

    @pytest.mark.asyncio
    async def test_terms_without_definitions_are_not_eligible(self, unit_env):
        # Arrange
        service = await unit_env.get(WordOfDayService)
        await seed_term(await unit_env.get(TermRepository), word="vacío")
        (defined,) = await _seed_defined_terms(unit_env, words=["pana"])

        # Act
        result = await service.select_for_date(date(2025, 1, 2))

        # Assert
        assert result.term.id == defined.id

    @pytest.mark.asyncio
    async def test_no_eligible_terms_raises_not_found(self, unit_env):
        service = await unit_env.get(WordOfDayService)
        await seed_term(await unit_env.get(TermRepository), word="vacío")

        with pytest.raises(NotFoundError):
            await service.select_for_date(date(2025, 1, 1))

    @pytest.mark.asyncio
    async def test_region_filter_restricts_candidates(self, unit_env):
        # Arrange
        service = await unit_env.get(WordOfDayService)
        await _seed_defined_terms(unit_env, words=["guay", "tío"], region=Region.SPAIN)
        (mexican,) = await _seed_defined_terms(
            unit_env, words=["chido"], region=Region.MEXICO
        )

        # Act
        result = await service.select_for_date(date(2025, 5, 5), Region.MEXICO)

        # Assert
        assert result.term.id == mexican.id

    @pytest.mark.asyncio
    async def test_returns_best_definition_and_stats(self, unit_env):
        # Arrange
        service = await unit_env.get(WordOfDayService)
        term_repo = await unit_env.get(TermRepository)
        definition_repo = await unit_env.get(DefinitionRepository)
        term = await seed_term(term_repo, word="pana")
        await seed_definition(
            definition_repo, term, votes=VoteCounters(up=1, down=0)
        )
        best = await seed_definition(
            definition_repo,
            term,
            content="Amigo cercano, compañero de confianza.",
            votes=VoteCounters(up=4, down=1),
        )

        # Act
        result = await service.select_for_date(date(2025, 2, 2))

        # Assert
        assert result.best_definition.id == best.id
        assert result.stats.definition_count == 2
        assert (result.stats.total_up, result.stats.total_down) == (5, 1)
