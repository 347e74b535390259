"""In-memory comment repository for testing."""

from typing import List, Optional

from jerga.domain.model import Comment
from jerga.domain.repository.comment import CommentRepository
from jerga.domain.value import CommentId, DefinitionId

from .votable import InMemoryVotableStore


class InMemoryCommentRepository(InMemoryVotableStore[Comment], CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._items.get(comment_id)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._items[comment.id] = comment
        return comment

    async def find_by_definition(
        self,
        definition_id: DefinitionId,
        parent_id: Optional[CommentId] = None,
        limit: int = 20,
    ) -> List[Comment]:
        """Active comments on a definition, best first."""
        comments = [
            c
            for c in self._items.values()
            if c.definition_id == definition_id
            and c.parent_id == parent_id
            and c.is_active
        ]
        comments.sort(key=lambda c: (c.votes.score, c.created_at), reverse=True)
        return comments[:limit]
