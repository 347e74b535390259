"""Discovery routes: trending and word of the day."""

from datetime import date

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from jerga.application.usecase.discovery import (
    GetTrendingRequest,
    GetTrendingResponse,
    GetTrendingUseCase,
    GetWordOfDayRequest,
    GetWordOfDayResponse,
    GetWordOfDayUseCase,
)
from jerga.domain.value import TrendingKind, TrendingPeriod, parse_region_filter

router = APIRouter(tags=["discovery"], route_class=DishkaRoute)


@router.get("/trending", response_model=GetTrendingResponse)
async def get_trending(
    get_trending_use_case: FromDishka[GetTrendingUseCase],
    kind: TrendingKind = TrendingKind.BOTH,
    period: TrendingPeriod = TrendingPeriod.WEEK,
    region: str | None = None,
    limit: int | None = Query(default=None, ge=1),
) -> GetTrendingResponse:
    """Trending terms and/or top definitions for a period.

    Args:
        get_trending_use_case: Trending use case from DI
        kind: terms, definitions or both
        period: day, week, month or all
        region: Optional region filter, "all" for every region
        limit: Result size, clamped to the configured maximum

    Returns:
        The ranked results and the window they were computed over
    """
    return await get_trending_use_case.execute(
        GetTrendingRequest(
            kind=kind,
            period=period,
            region=parse_region_filter(region),
            limit=limit,
        )
    )


@router.get("/word-of-day", response_model=GetWordOfDayResponse)
async def get_word_of_day(
    get_word_of_day_use_case: FromDishka[GetWordOfDayUseCase],
    day: date | None = Query(default=None, alias="date"),
    region: str | None = None,
) -> GetWordOfDayResponse:
    """The word of the day. Every caller gets the same term for a given date."""
    return await get_word_of_day_use_case.execute(
        GetWordOfDayRequest(day=day, region=parse_region_filter(region))
    )
