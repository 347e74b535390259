"""List dichos use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from jerga.application.usecase.base import BaseUseCase
from jerga.application.usecase.common import DichoItem
from jerga.domain.service import DichoService
from jerga.domain.value import Region, TermId


class ListDichosRequest(BaseModel):
    """List dichos request."""

    term_id: UUID
    region: Region | None = None
    limit: int = Field(default=20, ge=1, le=50)


class ListDichosResponse(BaseModel):
    """List dichos response."""

    term_id: str
    dichos: list[DichoItem]
    total: int


class ListDichosUseCase(BaseUseCase[ListDichosRequest, ListDichosResponse]):
    """Use case for listing the sayings of a term."""

    def __init__(self, dicho_service: DichoService) -> None:
        self.dicho_service = dicho_service

    async def execute(self, request: ListDichosRequest) -> ListDichosResponse:
        dichos = await self.dicho_service.list_dichos(
            TermId(request.term_id), request.region, request.limit
        )
        return ListDichosResponse(
            term_id=str(request.term_id),
            dichos=[DichoItem.from_dicho(d) for d in dichos],
            total=len(dichos),
        )
