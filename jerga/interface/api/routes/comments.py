"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from jerga.application.usecase.comment import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    PostCommentRequest,
    PostCommentUseCase,
)
from jerga.application.usecase.common import CommentItem
from jerga.domain.service import JWTService
from jerga.interface.api.auth import current_user_id

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class PostCommentAPIRequest(BaseModel):
    """API request for commenting on a definition."""

    definition_id: UUID
    content: str = Field(min_length=1, max_length=1000)
    parent_id: UUID | None = None


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def post_comment(
    request: PostCommentAPIRequest,
    post_comment_use_case: FromDishka[PostCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Comment on a definition, or reply to a comment on it.

    Requires authentication. The definition's author is notified.
    """
    user_id = current_user_id(jwt_service, auth_token, authorization)
    return await post_comment_use_case.execute(
        PostCommentRequest(
            definition_id=request.definition_id,
            content=request.content,
            parent_id=request.parent_id,
            user_id=user_id,
        )
    )


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    definition_id: UUID,
    parent_id: UUID | None = None,
    limit: int = Query(default=20, ge=1, le=50),
) -> ListCommentsResponse:
    """Comments on a definition; pass parent_id for the replies to one comment."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(
            definition_id=definition_id, parent_id=parent_id, limit=limit
        )
    )
