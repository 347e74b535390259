"""Trending domain service."""

import calendar
from datetime import datetime, timedelta, timezone
from typing import Optional

import logfire

from jerga.config import RankingSettings
from jerga.domain.model import Definition, TermActivity, TrendingTerm
from jerga.domain.repository import DefinitionRepository, TermRepository
from jerga.domain.value import Region, TrendingPeriod

from .base import Service

# Window start used for the "all" period
ALL_TIME_START = datetime(2020, 1, 1, tzinfo=timezone.utc)

SECONDS_PER_DAY = 24 * 60 * 60


def _one_month_before(now: datetime) -> datetime:
    """Same day and time one calendar month earlier, clamped to month end."""
    year, month = (now.year, now.month - 1) if now.month > 1 else (now.year - 1, 12)
    day = min(now.day, calendar.monthrange(year, month)[1])
    return now.replace(year=year, month=month, day=day)


def window_for_period(period: TrendingPeriod, now: datetime) -> tuple[datetime, datetime]:
    """Map a trending period to a (start, end) window ending at ``now``."""
    if period == TrendingPeriod.DAY:
        start = now - timedelta(days=1)
    elif period == TrendingPeriod.WEEK:
        start = now - timedelta(days=7)
    elif period == TrendingPeriod.MONTH:
        start = _one_month_before(now)
    else:
        start = ALL_TIME_START
    return start, now


class TrendingService(Service):
    """Ranks terms and definitions by recent activity.

    Term score::

        definition_weight * definitions in window
        + vote_score_weight * summed vote score of those definitions
        + recency_weight * days from window start to latest activity

    Ties are broken by latest activity, most recent first.
    """

    def __init__(
        self,
        term_repository: TermRepository,
        definition_repository: DefinitionRepository,
        ranking_settings: RankingSettings,
    ) -> None:
        """Initialize trending service.

        Args:
            term_repository: Term repository
            definition_repository: Definition repository
            ranking_settings: Score weights
        """
        self.term_repository = term_repository
        self.definition_repository = definition_repository
        self.ranking = ranking_settings

    def trending_score(self, activity: TermActivity, window_start: datetime) -> float:
        """Composite trending score for one term's activity."""
        days = (activity.latest_activity - window_start).total_seconds() / SECONDS_PER_DAY
        return (
            self.ranking.definition_weight * activity.definition_count
            + self.ranking.vote_score_weight * activity.total_vote_score
            + self.ranking.recency_weight * days
        )

    async def rank_terms(
        self,
        window_start: datetime,
        window_end: datetime,
        region: Optional[Region] = None,
        limit: int = 10,
    ) -> list[TrendingTerm]:
        """Terms ordered by trending score within the window.

        Args:
            window_start: Start of the window
            window_end: End of the window
            region: Region filter, or None for all regions
            limit: Maximum number of terms

        Returns:
            Trending terms, highest score first
        """
        with logfire.span(
            "trending_service.rank_terms",
            window_start=window_start.isoformat(),
            region=region.value if region else None,
            limit=limit,
        ):
            activities = await self.definition_repository.aggregate_term_activity(
                window_start, window_end, region
            )
            scored = [
                (self.trending_score(activity, window_start), activity)
                for activity in activities
            ]
            scored.sort(key=lambda s: (s[0], s[1].latest_activity), reverse=True)

            # Only active terms are returned, inactive ones drop out of the ranking
            terms = await self.term_repository.find_by_ids(
                [activity.term_id for _, activity in scored]
            )
            terms_by_id = {term.id: term for term in terms}

            ranked = [
                TrendingTerm(
                    term=terms_by_id[activity.term_id],
                    trending_score=round(score, 4),
                    definition_count=activity.definition_count,
                    total_vote_score=activity.total_vote_score,
                    latest_activity=activity.latest_activity,
                )
                for score, activity in scored
                if activity.term_id in terms_by_id
            ][:limit]

            logfire.info(
                "Trending terms ranked", candidates=len(activities), returned=len(ranked)
            )
            return ranked

    async def rank_definitions(
        self,
        window_start: datetime,
        window_end: datetime,
        region: Optional[Region] = None,
        limit: int = 10,
    ) -> list[Definition]:
        """Positively scored definitions in the window, best first."""
        with logfire.span(
            "trending_service.rank_definitions",
            window_start=window_start.isoformat(),
            region=region.value if region else None,
            limit=limit,
        ):
            return await self.definition_repository.find_top_scored(
                window_start, window_end, region, limit
            )
