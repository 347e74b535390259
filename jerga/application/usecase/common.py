"""Response items and steps shared by several use cases."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from jerga.domain.error import DomainError
from jerga.domain.model import Comment, Definition, Dicho, Term
from jerga.domain.service import BadgeService, ReputationService
from jerga.domain.value import Region, UserId, VoteCounters, VoteType


class VoteCountsItem(BaseModel):
    """Vote tallies in responses."""

    up: int
    down: int
    score: int

    @classmethod
    def from_counters(cls, counters: VoteCounters) -> "VoteCountsItem":
        return cls(up=counters.up, down=counters.down, score=counters.score)


class TermItem(BaseModel):
    """Term in responses."""

    term_id: str
    word: str
    region: Region
    tags: list[str]
    synonyms: list[str]
    author_id: str
    created_at: datetime

    @classmethod
    def from_term(cls, term: Term) -> "TermItem":
        return cls(
            term_id=str(term.id),
            word=term.word.root,
            region=term.region,
            tags=term.tags,
            synonyms=term.synonyms,
            author_id=term.author_id,
            created_at=term.created_at,
        )


class DefinitionItem(BaseModel):
    """Definition in responses."""

    definition_id: str
    term_id: str
    content: str
    example: str | None
    author_id: str
    region: Region
    votes: VoteCountsItem
    user_vote: VoteType | None = None
    created_at: datetime

    @classmethod
    def from_definition(
        cls, definition: Definition, user_vote: VoteType | None = None
    ) -> "DefinitionItem":
        return cls(
            definition_id=str(definition.id),
            term_id=str(definition.term_id),
            content=definition.content,
            example=definition.example,
            author_id=definition.author_id,
            region=definition.region,
            votes=VoteCountsItem.from_counters(definition.votes),
            user_vote=user_vote,
            created_at=definition.created_at,
        )


class CommentItem(BaseModel):
    """Comment in responses."""

    comment_id: str
    definition_id: str
    author_id: str
    content: str
    parent_id: str | None
    votes: VoteCountsItem
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            definition_id=str(comment.definition_id),
            author_id=comment.author_id,
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            votes=VoteCountsItem.from_counters(comment.votes),
            created_at=comment.created_at,
        )


class DichoItem(BaseModel):
    """Dicho in responses."""

    dicho_id: str
    term_id: str
    content: str
    translation: str | None
    author_id: str
    region: Region
    votes: VoteCountsItem
    created_at: datetime

    @classmethod
    def from_dicho(cls, dicho: Dicho) -> "DichoItem":
        return cls(
            dicho_id=str(dicho.id),
            term_id=str(dicho.term_id),
            content=dicho.content,
            translation=dicho.translation,
            author_id=dicho.author_id,
            region=dicho.region,
            votes=VoteCountsItem.from_counters(dicho.votes),
            created_at=dicho.created_at,
        )


async def refresh_user_standing(
    user_id: UserId,
    reputation_service: ReputationService,
    badge_service: BadgeService,
) -> list[str]:
    """Recompute reputation, then award any newly earned badges.

    Runs after the user's action has already succeeded, so failures are
    logged and never raised.

    Returns:
        IDs of badges newly awarded, empty on failure
    """
    try:
        await reputation_service.recompute(user_id)
        return await badge_service.evaluate(user_id)
    except DomainError as e:
        # Typically a voter who has not been synced as a user yet
        logfire.warn(
            "Skipped reputation and badge refresh", user_id=user_id, error=str(e)
        )
    except Exception as e:
        logfire.error(
            "Failed to refresh reputation and badges",
            user_id=user_id,
            error=str(e),
        )
    return []
