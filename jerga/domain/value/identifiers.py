"""Strongly typed identifiers for Jerga domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Users are keyed by the identity provider's opaque subject string
UserId = NewType("UserId", str)

# Content entities
TermId = NewType("TermId", UUID)
DefinitionId = NewType("DefinitionId", UUID)
CommentId = NewType("CommentId", UUID)
DichoId = NewType("DichoId", UUID)

# Interaction records
VoteId = NewType("VoteId", UUID)
NotificationId = NewType("NotificationId", UUID)
FlagId = NewType("FlagId", UUID)
