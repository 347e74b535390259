"""Flag use cases."""

from .create_flag import CreateFlagRequest, CreateFlagUseCase, FlagItem
from .moderation import (
    ListFlagsRequest,
    ListFlagsResponse,
    ListFlagsUseCase,
    ReviewFlagRequest,
    ReviewFlagUseCase,
)

__all__ = [
    "CreateFlagRequest",
    "CreateFlagUseCase",
    "FlagItem",
    "ListFlagsRequest",
    "ListFlagsResponse",
    "ListFlagsUseCase",
    "ReviewFlagRequest",
    "ReviewFlagUseCase",
]
