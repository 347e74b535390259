"""SQLAlchemy table definitions for Jerga.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def _vote_columns(table: str) -> list:
    """Denormalized vote counters carried by every votable table."""
    return [
        Column("votes_up", Integer, nullable=False, server_default="0"),
        Column("votes_down", Integer, nullable=False, server_default="0"),
        Column("votes_score", Integer, nullable=False, server_default="0"),
        CheckConstraint("votes_up >= 0", name=f"{table}_votes_up_non_negative"),
        CheckConstraint("votes_down >= 0", name=f"{table}_votes_down_non_negative"),
        CheckConstraint(
            "votes_score = votes_up - votes_down", name=f"{table}_votes_score_consistent"
        ),
    ]


def _timestamps() -> list:
    return [
        Column(
            "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
        ),
        Column(
            "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
        ),
    ]


# ============================================================================
# USERS TABLE (ID issued by the identity provider)
# ============================================================================
# Content tables reference users by ID without foreign keys: the identity
# provider is the source of truth and a user may act before being synced.
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("name", String(200), nullable=False),
    Column("email", String(255), nullable=False),
    Column("username", String(100), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("terms_submitted", Integer, nullable=False, server_default="0"),
    Column("definitions_submitted", Integer, nullable=False, server_default="0"),
    Column("votes_given", Integer, nullable=False, server_default="0"),
    Column("comments_posted", Integer, nullable=False, server_default="0"),
    Column("dichos_submitted", Integer, nullable=False, server_default="0"),
    Column("badges", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("region", String(50), nullable=False, server_default="General"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    *_timestamps(),
    CheckConstraint("reputation >= 0", name="users_reputation_non_negative"),
    CheckConstraint(
        "role IN ('user', 'moderator', 'admin')", name="users_role_valid"
    ),
)

Index("idx_users_email", users_table.c.email)
Index("idx_users_reputation", users_table.c.reputation.desc())

# ============================================================================
# TERMS TABLE
# ============================================================================
terms_table = Table(
    "terms",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("word", String(100), nullable=False),
    Column("region", String(50), nullable=False, server_default="General"),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("synonyms", ARRAY(String(100)), nullable=False, server_default="{}"),
    Column("author_id", String(255), nullable=False),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    *_timestamps(),
    UniqueConstraint("word", "region", name="unique_term_per_region"),
)

# Stable enumeration order for word of the day
Index("idx_terms_created_at_id", terms_table.c.created_at, terms_table.c.id)

# ============================================================================
# DEFINITIONS TABLE
# ============================================================================
definitions_table = Table(
    "definitions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "term_id", UUID, ForeignKey("terms.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("example", Text, nullable=True),
    Column("author_id", String(255), nullable=False),
    Column("region", String(50), nullable=False, server_default="General"),
    *_vote_columns("definitions"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    *_timestamps(),
    CheckConstraint(
        "char_length(content) BETWEEN 10 AND 2000", name="definitions_content_length"
    ),
)

Index("idx_definitions_term_id", definitions_table.c.term_id)
Index("idx_definitions_created_at", definitions_table.c.created_at)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "definition_id",
        UUID,
        ForeignKey("definitions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", String(255), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    *_vote_columns("comments"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    *_timestamps(),
)

Index(
    "idx_comments_definition_parent",
    comments_table.c.definition_id,
    comments_table.c.parent_id,
)

# ============================================================================
# DICHOS TABLE
# ============================================================================
dichos_table = Table(
    "dichos",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "term_id", UUID, ForeignKey("terms.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("translation", Text, nullable=True),
    Column("author_id", String(255), nullable=False),
    Column("region", String(50), nullable=False, server_default="General"),
    *_vote_columns("dichos"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    *_timestamps(),
)

Index("idx_dichos_term_id", dichos_table.c.term_id)

# ============================================================================
# VOTES TABLE (Polymorphic: definitions, comments or dichos)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", String(255), nullable=False),
    Column("votable_type", String(20), nullable=False),
    Column("votable_id", UUID, nullable=False),
    Column("vote_type", String(10), nullable=False),
    *_timestamps(),
    UniqueConstraint("user_id", "votable_type", "votable_id", name="unique_vote"),
    CheckConstraint(
        "votable_type IN ('definition', 'comment', 'dicho')",
        name="votes_votable_type_valid",
    ),
    CheckConstraint("vote_type IN ('up', 'down')", name="votes_vote_type_valid"),
)

Index("idx_votes_votable", votes_table.c.votable_type, votes_table.c.votable_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", String(255), nullable=False),
    Column("type", String(30), nullable=False),
    Column("title", String(200), nullable=False),
    Column("message", String(500), nullable=False),
    Column("related_id", String(255), nullable=True),
    Column("related_type", String(20), nullable=True),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at.desc(),
)

# ============================================================================
# FLAGS TABLE
# ============================================================================
flags_table = Table(
    "flags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("reporter_id", String(255), nullable=False),
    Column("target_type", String(20), nullable=False),
    Column("target_id", UUID, nullable=False),
    Column("reason", String(40), nullable=False),
    Column("custom_reason", String(500), nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("moderator_id", String(255), nullable=True),
    Column("moderator_notes", String(1000), nullable=True),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    *_timestamps(),
)

Index("idx_flags_status_created", flags_table.c.status, flags_table.c.created_at)
Index(
    "idx_flags_reporter_target",
    flags_table.c.reporter_id,
    flags_table.c.target_type,
    flags_table.c.target_id,
)
