"""initial_schema

Create the schema for the civic check service:
- Topics (admin-managed, with denormalized vote counters)
- Votes (one per topic and user token, up or down)
- Comments (anonymous, append-only, admin-deletable)
- Admin logs (append-only audit trail of admin create/delete)

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-19 10:12:44.512903

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_choice AS ENUM ('up', 'down');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE admin_action_type AS ENUM ('create', 'delete');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE admin_entity_type AS ENUM ('topic', 'comment');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # TOPICS table
    # ========================================================================
    op.create_table(
        "topics",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("external_link", sa.Text(), nullable=True),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvotes >= 0", name="topics_upvotes_non_negative"),
        sa.CheckConstraint("downvotes >= 0", name="topics_downvotes_non_negative"),
    )
    op.create_index(
        "idx_topics_created_at", "topics", [sa.text("created_at DESC")]
    )

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("topic_id", sa.UUID(), nullable=False),
        sa.Column("user_token", sa.String(128), nullable=False),
        sa.Column(
            "choice",
            postgresql.ENUM("up", "down", name="vote_choice", create_type=False),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("topic_id", "user_token", name="unique_topic_vote"),
    )
    op.create_index("idx_votes_user_token", "votes", ["user_token"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("topic_id", sa.UUID(), nullable=False),
        sa.Column(
            "author_display_name",
            sa.String(100),
            nullable=False,
            server_default="Anonymous",
        ),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "length(text) BETWEEN 1 AND 2000", name="comments_text_length"
        ),
    )
    op.create_index(
        "idx_comments_topic_created",
        "comments",
        ["topic_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # ADMIN_LOGS table (append-only)
    # ========================================================================
    op.create_table(
        "admin_logs",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column(
            "action",
            postgresql.ENUM(
                "create", "delete", name="admin_action_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column(
            "entity_type",
            postgresql.ENUM(
                "topic", "comment", name="admin_entity_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("entity_id", sa.UUID(), nullable=False),
        sa.Column(
            "details",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_admin_logs_entity", "admin_logs", ["entity_type", "entity_id"]
    )
    op.create_index(
        "idx_admin_logs_created_at", "admin_logs", [sa.text("created_at DESC")]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("admin_logs")
    op.drop_table("comments")
    op.drop_table("votes")
    op.drop_table("topics")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS admin_entity_type")
    op.execute("DROP TYPE IF EXISTS admin_action_type")
    op.execute("DROP TYPE IF EXISTS vote_choice")
