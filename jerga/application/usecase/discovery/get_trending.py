"""Get trending use case."""

from datetime import datetime

from pydantic import BaseModel

from jerga.application.usecase.base import BaseUseCase
from jerga.application.usecase.common import DefinitionItem, TermItem
from jerga.domain.model.common import utcnow
from jerga.domain.service import TrendingService, window_for_period
from jerga.domain.value import Region, TrendingKind, TrendingPeriod


class TrendingTermItem(BaseModel):
    """Trending term in response."""

    term: TermItem
    trending_score: float
    definition_count: int
    total_vote_score: int
    latest_activity: datetime


class GetTrendingRequest(BaseModel):
    """Get trending request."""

    kind: TrendingKind = TrendingKind.BOTH
    period: TrendingPeriod = TrendingPeriod.WEEK
    region: Region | None = None
    limit: int | None = None  # Clamped to the configured bounds


class GetTrendingResponse(BaseModel):
    """Get trending response."""

    period: TrendingPeriod
    window_start: datetime
    window_end: datetime
    terms: list[TrendingTermItem] | None = None
    definitions: list[DefinitionItem] | None = None


class GetTrendingUseCase(BaseUseCase[GetTrendingRequest, GetTrendingResponse]):
    """Use case for trending terms and top definitions in a period."""

    def __init__(self, trending_service: TrendingService) -> None:
        """Initialize get trending use case.

        Args:
            trending_service: Trending domain service
        """
        self.trending_service = trending_service

    def _clamp_limit(self, limit: int | None) -> int:
        ranking = self.trending_service.ranking
        if limit is None:
            return ranking.default_limit
        return max(1, min(limit, ranking.max_limit))

    async def execute(self, request: GetTrendingRequest) -> GetTrendingResponse:
        """Execute get trending flow.

        Returns:
            Ranked terms and/or definitions, depending on the requested kind
        """
        window_start, window_end = window_for_period(request.period, utcnow())
        limit = self._clamp_limit(request.limit)

        response = GetTrendingResponse(
            period=request.period,
            window_start=window_start,
            window_end=window_end,
        )

        if request.kind in (TrendingKind.TERMS, TrendingKind.BOTH):
            ranked = await self.trending_service.rank_terms(
                window_start, window_end, request.region, limit
            )
            response.terms = [
                TrendingTermItem(
                    term=TermItem.from_term(t.term),
                    trending_score=t.trending_score,
                    definition_count=t.definition_count,
                    total_vote_score=t.total_vote_score,
                    latest_activity=t.latest_activity,
                )
                for t in ranked
            ]

        if request.kind in (TrendingKind.DEFINITIONS, TrendingKind.BOTH):
            definitions = await self.trending_service.rank_definitions(
                window_start, window_end, request.region, limit
            )
            response.definitions = [
                DefinitionItem.from_definition(d) for d in definitions
            ]

        return response
