"""Mappers for converting between database rows and domain models.

Domain models are frozen pydantic models, so rows are mapped by hand rather
than through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from jerga.domain.model import Comment, Definition, Dicho, Flag, Notification, Term, User, Vote
from jerga.domain.value import (
    CommentId,
    ContributionCounters,
    DefinitionId,
    DichoId,
    FlagId,
    FlagReason,
    FlagStatus,
    FlagTargetType,
    NotificationId,
    NotificationType,
    Region,
    RelatedType,
    TermId,
    UserId,
    UserRole,
    VotableType,
    VoteCounters,
    VoteId,
    VoteType,
    Word,
)


def row_to_counters(row: Dict[str, Any]) -> VoteCounters:
    """Vote counters from a votable row's ``votes_up``/``votes_down`` columns."""
    return VoteCounters(up=row["votes_up"], down=row["votes_down"])


def counters_to_dict(counters: VoteCounters) -> Dict[str, Any]:
    return {
        "votes_up": counters.up,
        "votes_down": counters.down,
        "votes_score": counters.score,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        name=row["name"],
        email=row["email"],
        username=row.get("username"),
        avatar_url=row.get("avatar_url"),
        contributions=ContributionCounters(
            terms_submitted=row["terms_submitted"],
            definitions_submitted=row["definitions_submitted"],
            votes_given=row["votes_given"],
            comments_posted=row["comments_posted"],
            dichos_submitted=row["dichos_submitted"],
        ),
        badges=list(row["badges"] or []),
        reputation=row["reputation"],
        role=UserRole(row["role"]),
        region=Region(row["region"]),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "username": user.username,
        "avatar_url": user.avatar_url,
        **user.contributions.model_dump(),
        "badges": list(user.badges),
        "reputation": user.reputation,
        "role": user.role.value,
        "region": user.region.value,
        "is_active": user.is_active,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_term(row: Dict[str, Any]) -> Term:
    """Convert database row to Term domain model."""
    return Term(
        id=TermId(row["id"]),
        word=Word(row["word"]),
        region=Region(row["region"]),
        tags=list(row["tags"] or []),
        synonyms=list(row["synonyms"] or []),
        author_id=UserId(row["author_id"]),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def term_to_dict(term: Term) -> Dict[str, Any]:
    return {
        "id": term.id,
        "word": term.word.root,
        "region": term.region.value,
        "tags": list(term.tags),
        "synonyms": list(term.synonyms),
        "author_id": term.author_id,
        "is_active": term.is_active,
        "created_at": term.created_at,
        "updated_at": term.updated_at,
    }


def row_to_definition(row: Dict[str, Any]) -> Definition:
    """Convert database row to Definition domain model."""
    return Definition(
        id=DefinitionId(row["id"]),
        term_id=TermId(row["term_id"]),
        content=row["content"],
        example=row.get("example"),
        author_id=UserId(row["author_id"]),
        region=Region(row["region"]),
        votes=row_to_counters(row),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def definition_to_dict(definition: Definition) -> Dict[str, Any]:
    return {
        "id": definition.id,
        "term_id": definition.term_id,
        "content": definition.content,
        "example": definition.example,
        "author_id": definition.author_id,
        "region": definition.region.value,
        **counters_to_dict(definition.votes),
        "is_active": definition.is_active,
        "created_at": definition.created_at,
        "updated_at": definition.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(row["id"]),
        definition_id=DefinitionId(row["definition_id"]),
        author_id=UserId(row["author_id"]),
        content=row["content"],
        parent_id=CommentId(row["parent_id"]) if row.get("parent_id") else None,
        votes=row_to_counters(row),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return {
        "id": comment.id,
        "definition_id": comment.definition_id,
        "author_id": comment.author_id,
        "content": comment.content,
        "parent_id": comment.parent_id,
        **counters_to_dict(comment.votes),
        "is_active": comment.is_active,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_dicho(row: Dict[str, Any]) -> Dicho:
    """Convert database row to Dicho domain model."""
    return Dicho(
        id=DichoId(row["id"]),
        term_id=TermId(row["term_id"]),
        content=row["content"],
        translation=row.get("translation"),
        author_id=UserId(row["author_id"]),
        region=Region(row["region"]),
        votes=row_to_counters(row),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def dicho_to_dict(dicho: Dicho) -> Dict[str, Any]:
    return {
        "id": dicho.id,
        "term_id": dicho.term_id,
        "content": dicho.content,
        "translation": dicho.translation,
        "author_id": dicho.author_id,
        "region": dicho.region.value,
        **counters_to_dict(dicho.votes),
        "is_active": dicho.is_active,
        "created_at": dicho.created_at,
        "updated_at": dicho.updated_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        user_id=UserId(row["user_id"]),
        votable_type=VotableType(row["votable_type"]),
        votable_id=row["votable_id"],
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    return {
        "id": vote.id,
        "user_id": vote.user_id,
        "votable_type": vote.votable_type.value,
        "votable_id": vote.votable_id,
        "vote_type": vote.vote_type.value,
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(row["id"]),
        user_id=UserId(row["user_id"]),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        related_id=row.get("related_id"),
        related_type=(
            RelatedType(row["related_type"]) if row.get("related_type") else None
        ),
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "type": notification.type.value,
        "title": notification.title,
        "message": notification.message,
        "related_id": notification.related_id,
        "related_type": (
            notification.related_type.value if notification.related_type else None
        ),
        "is_read": notification.is_read,
        "created_at": notification.created_at,
    }


def row_to_flag(row: Dict[str, Any]) -> Flag:
    """Convert database row to Flag domain model."""
    return Flag(
        id=FlagId(row["id"]),
        reporter_id=UserId(row["reporter_id"]),
        target_type=FlagTargetType(row["target_type"]),
        target_id=row["target_id"],
        reason=FlagReason(row["reason"]),
        custom_reason=row.get("custom_reason"),
        status=FlagStatus(row["status"]),
        moderator_id=UserId(row["moderator_id"]) if row.get("moderator_id") else None,
        moderator_notes=row.get("moderator_notes"),
        reviewed_at=row.get("reviewed_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def flag_to_dict(flag: Flag) -> Dict[str, Any]:
    return {
        "id": flag.id,
        "reporter_id": flag.reporter_id,
        "target_type": flag.target_type.value,
        "target_id": flag.target_id,
        "reason": flag.reason.value,
        "custom_reason": flag.custom_reason,
        "status": flag.status.value,
        "moderator_id": flag.moderator_id,
        "moderator_notes": flag.moderator_notes,
        "reviewed_at": flag.reviewed_at,
        "created_at": flag.created_at,
        "updated_at": flag.updated_at,
    }
