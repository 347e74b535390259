"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from jerga.application.usecase.base import BaseUseCase
from jerga.application.usecase.common import CommentItem
from jerga.domain.service import CommentService
from jerga.domain.value import CommentId, DefinitionId


class ListCommentsRequest(BaseModel):
    """List comments request."""

    definition_id: UUID
    parent_id: UUID | None = None  # None lists top-level comments
    limit: int = Field(default=20, ge=1, le=50)


class ListCommentsResponse(BaseModel):
    """List comments response."""

    definition_id: str
    comments: list[CommentItem]
    total: int


class ListCommentsUseCase(BaseUseCase[ListCommentsRequest, ListCommentsResponse]):
    """Use case for listing comments on a definition, best first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        comments = await self.comment_service.list_comments(
            DefinitionId(request.definition_id),
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
            limit=request.limit,
        )
        return ListCommentsResponse(
            definition_id=str(request.definition_id),
            comments=[CommentItem.from_comment(c) for c in comments],
            total=len(comments),
        )
