"""Dicho (saying) routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from jerga.application.usecase.common import DichoItem
from jerga.application.usecase.dicho import (
    ListDichosRequest,
    ListDichosResponse,
    ListDichosUseCase,
    SubmitDichoRequest,
    SubmitDichoUseCase,
)
from jerga.domain.service import JWTService
from jerga.domain.value import Region, parse_region_filter
from jerga.interface.api.auth import current_user_id

router = APIRouter(prefix="/dichos", tags=["dichos"], route_class=DishkaRoute)


class SubmitDichoAPIRequest(BaseModel):
    """API request for adding a saying to a term."""

    term_id: UUID
    content: str = Field(min_length=1, max_length=500)
    translation: str | None = Field(default=None, max_length=500)
    region: Region = Region.GENERAL


@router.post("", response_model=DichoItem, status_code=status.HTTP_201_CREATED)
async def submit_dicho(
    request: SubmitDichoAPIRequest,
    submit_dicho_use_case: FromDishka[SubmitDichoUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DichoItem:
    """Add a dicho to a term. Requires authentication."""
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await submit_dicho_use_case.execute(
        SubmitDichoRequest(
            term_id=request.term_id,
            content=request.content,
            translation=request.translation,
            region=request.region,
            user_id=user_id,
        )
    )


@router.get("", response_model=ListDichosResponse)
async def list_dichos(
    list_dichos_use_case: FromDishka[ListDichosUseCase],
    term_id: UUID,
    region: str | None = None,
    limit: int = Query(default=20, ge=1, le=50),
) -> ListDichosResponse:
    return await list_dichos_use_case.execute(
        ListDichosRequest(
            term_id=term_id, region=parse_region_filter(region), limit=limit
        )
    )
