"""Term use cases."""

from .get_random_term import GetRandomTermRequest, GetRandomTermUseCase
from .get_term import GetTermRequest, GetTermUseCase, TermWithDefinitionsResponse
from .search_terms import SearchTermsRequest, SearchTermsResponse, SearchTermsUseCase
from .submit_term import SubmitTermRequest, SubmitTermResponse, SubmitTermUseCase

__all__ = [
    "GetRandomTermRequest",
    "GetRandomTermUseCase",
    "GetTermRequest",
    "GetTermUseCase",
    "SearchTermsRequest",
    "SearchTermsResponse",
    "SearchTermsUseCase",
    "SubmitTermRequest",
    "SubmitTermResponse",
    "SubmitTermUseCase",
    "TermWithDefinitionsResponse",
]
