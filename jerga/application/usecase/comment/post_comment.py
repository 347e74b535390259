"""Post comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from jerga.application.usecase.base import BaseUseCase, require_user
from jerga.application.usecase.common import CommentItem, refresh_user_standing
from jerga.domain.model import Comment, Definition
from jerga.domain.service import (
    BadgeService,
    CommentService,
    NotificationService,
    ReputationService,
    UserService,
)
from jerga.domain.value import (
    CommentId,
    ContributionType,
    DefinitionId,
    NotificationType,
    RelatedType,
)


class PostCommentRequest(BaseModel):
    """Post comment request."""

    definition_id: UUID
    content: str = Field(min_length=1, max_length=1000)
    parent_id: UUID | None = None  # Parent comment ID for replies
    user_id: str | None  # User ID from authenticated user


class PostCommentUseCase(BaseUseCase[PostCommentRequest, CommentItem]):
    """Use case for commenting on a definition or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        notification_service: NotificationService,
        reputation_service: ReputationService,
        badge_service: BadgeService,
    ) -> None:
        """Initialize post comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            notification_service: Notification domain service
            reputation_service: Reputation domain service
            badge_service: Badge domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.notification_service = notification_service
        self.reputation_service = reputation_service
        self.badge_service = badge_service

    async def execute(self, request: PostCommentRequest) -> CommentItem:
        """Execute post comment flow.

        Steps:
        1. Create the comment (service validates definition and parent)
        2. Count it for the author
        3. Notify the definition's author (best effort, never self)
        4. Refresh the author's reputation and badges (best effort)

        Raises:
            UnauthenticatedError: If there is no authenticated user
            NotFoundError: If the definition or parent comment does not exist
            ValidationError: If the parent belongs to another definition
        """
        user_id = require_user(request.user_id, "comment")

        comment, definition = await self.comment_service.create_comment(
            definition_id=DefinitionId(request.definition_id),
            author_id=user_id,
            content=request.content,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )

        await self.user_service.increment_contribution(
            user_id, ContributionType.COMMENTS_POSTED
        )

        if definition.author_id != user_id:
            await self._notify_author(definition, comment)

        await refresh_user_standing(user_id, self.reputation_service, self.badge_service)

        return CommentItem.from_comment(comment)

    async def _notify_author(self, definition: Definition, comment: Comment) -> None:
        try:
            await self.notification_service.emit(
                user_id=definition.author_id,
                type=NotificationType.COMMENT,
                title="Nuevo comentario en tu definición",
                message="Alguien comentó tu definición.",
                related_id=str(comment.id),
                related_type=RelatedType.COMMENT,
            )
        except Exception as e:
            logfire.error(
                "Comment notification failed",
                definition_id=str(definition.id),
                error=str(e),
            )
