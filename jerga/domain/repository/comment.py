"""Comment repository interface."""

from abc import abstractmethod
from typing import List, Optional

from jerga.domain.model.comment import Comment
from jerga.domain.repository.votable import VotableRepository
from jerga.domain.value import CommentId, DefinitionId


class CommentRepository(VotableRepository):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def find_by_definition(
        self,
        definition_id: DefinitionId,
        parent_id: Optional[CommentId] = None,
        limit: int = 20,
    ) -> List[Comment]:
        """Active comments on a definition.

        Args:
            definition_id: The definition
            parent_id: Only replies to this comment; None for top-level comments
            limit: Maximum number of comments

        Returns:
            Comments ordered by score desc, then creation time desc
        """
        pass
