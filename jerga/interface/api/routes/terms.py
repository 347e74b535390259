"""Term routes: submission, lookup, random pick and search."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from jerga.application.usecase.term import (
    GetRandomTermRequest,
    GetRandomTermUseCase,
    GetTermRequest,
    GetTermUseCase,
    SearchTermsRequest,
    SearchTermsResponse,
    SearchTermsUseCase,
    SubmitTermRequest,
    SubmitTermResponse,
    SubmitTermUseCase,
    TermWithDefinitionsResponse,
)
from jerga.domain.service import JWTService
from jerga.domain.value import Region, Word, parse_region_filter
from jerga.interface.api.auth import current_user_id

router = APIRouter(tags=["terms"], route_class=DishkaRoute)


class SubmitTermAPIRequest(BaseModel):
    """API request for submitting a term with its first (or another) definition."""

    word: str = Field(min_length=1, max_length=100)
    region: Region = Region.GENERAL
    definition: str = Field(min_length=10, max_length=2000)
    example: str | None = Field(default=None, max_length=500)
    tags: list[str] = Field(default_factory=list, max_length=10)
    synonyms: list[str] = Field(default_factory=list, max_length=10)


@router.post(
    "/terms", response_model=SubmitTermResponse, status_code=status.HTTP_201_CREATED
)
async def submit_term(
    request: SubmitTermAPIRequest,
    submit_term_use_case: FromDishka[SubmitTermUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> SubmitTermResponse:
    """Submit a definition, creating the term if it is new in that region.

    Requires authentication.

    Args:
        request: Word, region and definition text
        submit_term_use_case: Submit term use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header, used when no cookie is sent

    Returns:
        The term, the new definition and whether the term was created
    """
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await submit_term_use_case.execute(
        SubmitTermRequest(
            word=Word(request.word),
            region=request.region,
            definition=request.definition,
            example=request.example,
            tags=request.tags,
            synonyms=request.synonyms,
            user_id=user_id,
        )
    )


@router.get("/terms", response_model=TermWithDefinitionsResponse)
async def get_term(
    get_term_use_case: FromDishka[GetTermUseCase],
    jwt_service: FromDishka[JWTService],
    word: str = Query(min_length=1, max_length=100),
    region: str | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> TermWithDefinitionsResponse:
    """Look up a term with its definitions, best first.

    Authentication is optional; when present, each definition carries the
    caller's own vote.
    """
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await get_term_use_case.execute(
        GetTermRequest(
            word=Word(word), region=parse_region_filter(region), user_id=user_id
        )
    )


@router.get("/terms/random", response_model=TermWithDefinitionsResponse)
async def get_random_term(
    get_random_term_use_case: FromDishka[GetRandomTermUseCase],
    jwt_service: FromDishka[JWTService],
    region: str | None = None,
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> TermWithDefinitionsResponse:
    """A uniformly random term that has at least one definition."""
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await get_random_term_use_case.execute(
        GetRandomTermRequest(region=parse_region_filter(region), user_id=user_id)
    )


@router.get("/search", response_model=SearchTermsResponse)
async def search_terms(
    search_terms_use_case: FromDishka[SearchTermsUseCase],
    q: str = Query(min_length=1, max_length=100),
    region: str | None = None,
    limit: int = Query(default=20, ge=1, le=50),
) -> SearchTermsResponse:
    return await search_terms_use_case.execute(
        SearchTermsRequest(q=q, region=parse_region_filter(region), limit=limit)
    )
