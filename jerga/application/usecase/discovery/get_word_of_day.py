"""Get word of the day use case."""

from datetime import date

from pydantic import BaseModel

from jerga.application.usecase.base import BaseUseCase
from jerga.application.usecase.common import DefinitionItem, TermItem
from jerga.domain.service import WordOfDayService
from jerga.domain.value import Region


class GetWordOfDayRequest(BaseModel):
    """Get word of the day request."""

    day: date | None = None  # Defaults to today (UTC)
    region: Region | None = None


class WordStatsItem(BaseModel):
    """Vote statistics over the term's definitions."""

    definition_count: int
    total_up: int
    total_down: int
    score: int


class GetWordOfDayResponse(BaseModel):
    """Get word of the day response."""

    term: TermItem
    definition: DefinitionItem | None
    stats: WordStatsItem


class GetWordOfDayUseCase(BaseUseCase[GetWordOfDayRequest, GetWordOfDayResponse]):
    """Use case for the deterministic word of the day."""

    def __init__(self, word_of_day_service: WordOfDayService) -> None:
        """Initialize get word of the day use case.

        Args:
            word_of_day_service: Word of the day domain service
        """
        self.word_of_day_service = word_of_day_service

    async def execute(self, request: GetWordOfDayRequest) -> GetWordOfDayResponse:
        """Execute get word of the day flow.

        Raises:
            NotFoundError: If no term has a definition yet
        """
        selected = await self.word_of_day_service.select_for_date(
            request.day, request.region
        )
        stats = selected.stats
        return GetWordOfDayResponse(
            term=TermItem.from_term(selected.term),
            definition=(
                DefinitionItem.from_definition(selected.best_definition)
                if selected.best_definition
                else None
            ),
            stats=WordStatsItem(
                definition_count=stats.definition_count,
                total_up=stats.total_up,
                total_down=stats.total_down,
                score=stats.score,
            ),
        )
