"""Comment domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from jerga.domain.error import NotFoundError, ValidationError
from jerga.domain.model import Comment, Definition
from jerga.domain.repository import CommentRepository, DefinitionRepository
from jerga.domain.value import CommentId, DefinitionId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comments on definitions."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        definition_repository: DefinitionRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            definition_repository: Definition repository
        """
        self.comment_repository = comment_repository
        self.definition_repository = definition_repository

    async def create_comment(
        self,
        definition_id: DefinitionId,
        author_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> tuple[Comment, Definition]:
        """Comment on a definition or reply to another comment.

        Args:
            definition_id: Definition being discussed
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            The created comment and the definition it belongs to

        Raises:
            NotFoundError: If the definition or parent comment does not exist
            ValidationError: If the parent belongs to another definition
        """
        with logfire.span(
            "comment_service.create_comment",
            definition_id=str(definition_id),
            author_id=author_id,
            parent_id=str(parent_id) if parent_id else None,
        ):
            definition = await self.definition_repository.find_by_id(definition_id)
            if not definition or not definition.is_active:
                logfire.warn("Definition not found", definition_id=str(definition_id))
                raise NotFoundError("Definition", str(definition_id))

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or not parent.is_active:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("Comment", str(parent_id))
                if parent.definition_id != definition_id:
                    logfire.warn(
                        "Parent comment does not belong to definition",
                        parent_id=str(parent_id),
                        parent_definition_id=str(parent.definition_id),
                        definition_id=str(definition_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this definition"
                    )

            comment = await self.comment_repository.save(
                Comment(
                    id=CommentId(uuid4()),
                    definition_id=definition_id,
                    author_id=author_id,
                    content=content,
                    parent_id=parent_id,
                )
            )
            logfire.info(
                "Comment created",
                comment_id=str(comment.id),
                definition_id=str(definition_id),
            )
            return comment, definition

    async def list_comments(
        self,
        definition_id: DefinitionId,
        parent_id: Optional[CommentId] = None,
        limit: int = 20,
    ) -> list[Comment]:
        """Active comments on a definition, best first."""
        with logfire.span(
            "comment_service.list_comments",
            definition_id=str(definition_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            comments = await self.comment_repository.find_by_definition(
                definition_id, parent_id=parent_id, limit=limit
            )
            logfire.info(
                "Comments retrieved",
                definition_id=str(definition_id),
                count=len(comments),
            )
            return comments
