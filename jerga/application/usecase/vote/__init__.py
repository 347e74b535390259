"""Vote use cases."""

from .cast_vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    RateLimitInfo,
)
from .get_vote import GetVoteRequest, GetVoteResponse, GetVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetVoteRequest",
    "GetVoteResponse",
    "GetVoteUseCase",
    "RateLimitInfo",
]
