"""initial_schema

Create the foundational schema for Jerga:
- Users (ID issued by the identity provider, contribution counters, badges)
- Terms (unique per word and region) and their Definitions
- Comments (threaded, on definitions) and Dichos (sayings, on terms)
- Votes (up/down ledger, one row per user and item)
- Notifications and moderation Flags

Revision ID: 3c1f9a7d2e40
Revises:
Create Date: 2026-10-19 10:12:44.218301

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def _vote_columns(table: str) -> list:
    return [
        sa.Column("votes_up", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("votes_down", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("votes_score", sa.Integer(), nullable=False, server_default="0"),
        sa.CheckConstraint("votes_up >= 0", name=f"{table}_votes_up_non_negative"),
        sa.CheckConstraint(
            "votes_down >= 0", name=f"{table}_votes_down_non_negative"
        ),
        sa.CheckConstraint(
            "votes_score = votes_up - votes_down",
            name=f"{table}_votes_score_consistent",
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("username", sa.String(100), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("terms_submitted", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "definitions_submitted", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column("votes_given", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments_posted", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dichos_submitted", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "badges",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("reputation", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("role", sa.String(20), nullable=False, server_default="user"),
        sa.Column("region", sa.String(50), nullable=False, server_default="General"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("reputation >= 0", name="users_reputation_non_negative"),
        sa.CheckConstraint(
            "role IN ('user', 'moderator', 'admin')", name="users_role_valid"
        ),
    )
    op.create_index("idx_users_email", "users", ["email"])
    op.create_index(
        "idx_users_reputation", "users", [sa.text("reputation DESC")]
    )

    # ========================================================================
    # TERMS table
    # ========================================================================
    op.create_table(
        "terms",
        _uuid_pk(),
        sa.Column("word", sa.String(100), nullable=False),
        sa.Column("region", sa.String(50), nullable=False, server_default="General"),
        sa.Column(
            "tags", postgresql.ARRAY(sa.String(50)), nullable=False, server_default="{}"
        ),
        sa.Column(
            "synonyms",
            postgresql.ARRAY(sa.String(100)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("word", "region", name="unique_term_per_region"),
    )
    # Stable enumeration order for word of the day
    op.create_index("idx_terms_created_at_id", "terms", ["created_at", "id"])

    # ========================================================================
    # DEFINITIONS table
    # ========================================================================
    op.create_table(
        "definitions",
        _uuid_pk(),
        sa.Column("term_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("example", sa.Text(), nullable=True),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("region", sa.String(50), nullable=False, server_default="General"),
        *_vote_columns("definitions"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["term_id"], ["terms.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(content) BETWEEN 10 AND 2000",
            name="definitions_content_length",
        ),
    )
    op.create_index("idx_definitions_term_id", "definitions", ["term_id"])
    op.create_index("idx_definitions_created_at", "definitions", ["created_at"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _uuid_pk(),
        sa.Column("definition_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        *_vote_columns("comments"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["definition_id"], ["definitions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_comments_definition_parent", "comments", ["definition_id", "parent_id"]
    )

    # ========================================================================
    # DICHOS table
    # ========================================================================
    op.create_table(
        "dichos",
        _uuid_pk(),
        sa.Column("term_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("translation", sa.Text(), nullable=True),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("region", sa.String(50), nullable=False, server_default="General"),
        *_vote_columns("dichos"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["term_id"], ["terms.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_dichos_term_id", "dichos", ["term_id"])

    # ========================================================================
    # VOTES table (polymorphic: definition, comment, dicho)
    # ========================================================================
    op.create_table(
        "votes",
        _uuid_pk(),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("votable_type", sa.String(20), nullable=False),
        sa.Column("votable_id", sa.UUID(), nullable=False),
        sa.Column("vote_type", sa.String(10), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "user_id", "votable_type", "votable_id", name="unique_vote"
        ),
        sa.CheckConstraint(
            "votable_type IN ('definition', 'comment', 'dicho')",
            name="votes_votable_type_valid",
        ),
        sa.CheckConstraint(
            "vote_type IN ('up', 'down')", name="votes_vote_type_valid"
        ),
    )
    op.create_index("idx_votes_votable", "votes", ["votable_type", "votable_id"])

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        _uuid_pk(),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("type", sa.String(30), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("message", sa.String(500), nullable=False),
        sa.Column("related_id", sa.String(255), nullable=True),
        sa.Column("related_type", sa.String(20), nullable=True),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_user_created",
        "notifications",
        ["user_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # FLAGS table
    # ========================================================================
    op.create_table(
        "flags",
        _uuid_pk(),
        sa.Column("reporter_id", sa.String(255), nullable=False),
        sa.Column("target_type", sa.String(20), nullable=False),
        sa.Column("target_id", sa.UUID(), nullable=False),
        sa.Column("reason", sa.String(40), nullable=False),
        sa.Column("custom_reason", sa.String(500), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("moderator_id", sa.String(255), nullable=True),
        sa.Column("moderator_notes", sa.String(1000), nullable=True),
        sa.Column("reviewed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_flags_status_created", "flags", ["status", "created_at"])
    op.create_index(
        "idx_flags_reporter_target",
        "flags",
        ["reporter_id", "target_type", "target_id"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("flags")
    op.drop_table("notifications")
    op.drop_table("votes")
    op.drop_table("dichos")
    op.drop_table("comments")
    op.drop_table("definitions")
    op.drop_table("terms")
    op.drop_table("users")
