"""Repository interfaces for the Jerga domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from jerga.domain.repository.comment import CommentRepository
from jerga.domain.repository.definition import DefinitionRepository
from jerga.domain.repository.dicho import DichoRepository
from jerga.domain.repository.flag import FlagRepository
from jerga.domain.repository.notification import NotificationRepository
from jerga.domain.repository.term import TermRepository
from jerga.domain.repository.user import UserRepository
from jerga.domain.repository.votable import VotableRepository
from jerga.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "TermRepository",
    "DefinitionRepository",
    "CommentRepository",
    "DichoRepository",
    "VotableRepository",
    "VoteRepository",
    "NotificationRepository",
    "FlagRepository",
]
