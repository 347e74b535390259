"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import and_, insert, select

from jerga.domain.model import Comment
from jerga.domain.repository import CommentRepository
from jerga.domain.value import CommentId, DefinitionId
from jerga.persistence.mappers import comment_to_dict, row_to_comment
from jerga.persistence.repository.base import PostgresVotableRepository
from jerga.persistence.tables import comments_table


class PostgresCommentRepository(PostgresVotableRepository, CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    table = comments_table

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def save(self, comment: Comment) -> Comment:
        """Insert a comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self._execute(stmt)
        return comment

    async def find_by_definition(
        self,
        definition_id: DefinitionId,
        parent_id: Optional[CommentId] = None,
        limit: int = 20,
    ) -> List[Comment]:
        """Active comments on a definition at one level of the thread."""
        parent_filter = (
            comments_table.c.parent_id.is_(None)
            if parent_id is None
            else comments_table.c.parent_id == parent_id
        )
        stmt = (
            select(comments_table)
            .where(
                and_(
                    comments_table.c.definition_id == definition_id,
                    comments_table.c.is_active.is_(True),
                    parent_filter,
                )
            )
            .order_by(
                comments_table.c.votes_score.desc(), comments_table.c.created_at.desc()
            )
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]
