"""Discovery use cases (trending, word of the day)."""

from .get_trending import (
    GetTrendingRequest,
    GetTrendingResponse,
    GetTrendingUseCase,
    TrendingTermItem,
)
from .get_word_of_day import (
    GetWordOfDayRequest,
    GetWordOfDayResponse,
    GetWordOfDayUseCase,
)

__all__ = [
    "GetTrendingRequest",
    "GetTrendingResponse",
    "GetTrendingUseCase",
    "GetWordOfDayRequest",
    "GetWordOfDayResponse",
    "GetWordOfDayUseCase",
    "TrendingTermItem",
]
