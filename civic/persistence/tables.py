"""SQLAlchemy table definitions for the civic check service.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# TOPICS TABLE
# ============================================================================
topics_table = Table(
    "topics",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("external_link", Text, nullable=True),
    # Denormalized tally, maintained by the vote ledger
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0", name="topics_upvotes_non_negative"),
    CheckConstraint("downvotes >= 0", name="topics_downvotes_non_negative"),
)

Index("idx_topics_created_at", topics_table.c.created_at.desc())

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "topic_id", UUID, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_token", String(128), nullable=False),
    Column(
        "choice",
        Enum("up", "down", name="vote_choice", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("topic_id", "user_token", name="unique_topic_vote"),
)

Index("idx_votes_user_token", votes_table.c.user_token)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "topic_id", UUID, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_display_name",
        String(100),
        nullable=False,
        server_default="Anonymous",
    ),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "length(text) BETWEEN 1 AND 2000", name="comments_text_length"
    ),
)

Index(
    "idx_comments_topic_created",
    comments_table.c.topic_id,
    comments_table.c.created_at.desc(),
)

# ============================================================================
# ADMIN LOGS TABLE (append-only audit trail)
# ============================================================================
admin_logs_table = Table(
    "admin_logs",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "action",
        Enum("create", "delete", name="admin_action_type", create_type=False),
        nullable=False,
    ),
    Column(
        "entity_type",
        Enum("topic", "comment", name="admin_entity_type", create_type=False),
        nullable=False,
    ),
    # No FK: the entity is usually gone by the time anyone reads this
    Column("entity_id", UUID, nullable=False),
    Column("details", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_admin_logs_entity", admin_logs_table.c.entity_type, admin_logs_table.c.entity_id)
Index("idx_admin_logs_created_at", admin_logs_table.c.created_at.desc())
