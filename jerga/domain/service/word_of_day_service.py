"""Word of the day domain service."""

from datetime import date
from typing import Optional

import logfire

from jerga.domain.error import NotFoundError, PersistenceError
from jerga.domain.model import WordOfDay
from jerga.domain.model.common import Clock, utcnow
from jerga.domain.repository import DefinitionRepository, TermRepository
from jerga.domain.value import Region

from .base import Service


def date_seed(day: date) -> int:
    """Deterministic seed for a calendar date, e.g. 2024-03-15 -> 20240315."""
    return day.year * 10000 + day.month * 100 + day.day


class WordOfDayService(Service):
    """Selects one eligible term per calendar date.

    The term at position ``seed % eligible_count`` in the repository's
    stable order is chosen, so the same date and the same term set always
    give the same word.
    """

    def __init__(
        self,
        term_repository: TermRepository,
        definition_repository: DefinitionRepository,
        clock: Optional[Clock] = None,
    ) -> None:
        """Initialize word of the day service.

        Args:
            term_repository: Term repository
            definition_repository: Definition repository
            clock: Decides which date is "today", defaults to the system clock
        """
        self.term_repository = term_repository
        self.definition_repository = definition_repository
        self._clock = clock or utcnow

    async def select_for_date(
        self, day: Optional[date] = None, region: Optional[Region] = None
    ) -> WordOfDay:
        """Select the word of the day.

        Args:
            day: Calendar date, defaults to today in UTC
            region: Region filter, or None for all regions

        Returns:
            Selected term with its best definition and vote statistics

        Raises:
            NotFoundError: If no term is eligible
        """
        day = day or self._clock().date()
        seed = date_seed(day)

        with logfire.span(
            "word_of_day_service.select_for_date",
            day=day.isoformat(),
            region=region.value if region else None,
            seed=seed,
        ):
            total = await self.term_repository.count_eligible(region)
            if total == 0:
                logfire.warn(
                    "No eligible terms for word of the day",
                    region=region.value if region else None,
                )
                raise NotFoundError("Word of the day", day.isoformat())

            position = seed % total
            term = await self.term_repository.find_eligible_at(position, region)
            if term is None:
                # Eligible set shrank between count and fetch
                raise PersistenceError("Eligible terms changed during selection")

            definitions = await self.definition_repository.find_by_term(term.id)
            stats = await self.definition_repository.get_term_stats(term.id)

            logfire.info(
                "Word of the day selected",
                term_id=str(term.id),
                word=term.word.root,
                position=position,
                eligible=total,
            )
            return WordOfDay(
                term=term,
                best_definition=definitions[0] if definitions else None,
                stats=stats,
                seed=seed,
                eligible_count=total,
            )
