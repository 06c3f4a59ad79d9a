"""Create copilot and SEO tables

Revision ID: 003
Revises: 002
Create Date: 2026-06-09

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "003"
down_revision: str | None = "002"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # Copilot
    op.create_table(
        "conversations",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False, server_default="New conversation"),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("context_type", sa.String(length=100), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_conversations_user_id", "conversations", ["user_id"])
    op.create_index("ix_conversations_created_at", "conversations", ["created_at"])

    op.create_table(
        "messages",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("conversation_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("tool_calls", sa.JSON(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["conversation_id"], ["conversations.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_messages_conversation_id", "messages", ["conversation_id"])
    op.create_index("ix_messages_created_at", "messages", ["created_at"])
    op.create_index(
        "ix_messages_conversation_created", "messages", ["conversation_id", "created_at"]
    )

    op.create_table(
        "copilot_sessions",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("conversation_id", postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column("context_data", sa.JSON(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["conversation_id"], ["conversations.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_copilot_sessions_user_id", "copilot_sessions", ["user_id"])
    op.create_index("ix_copilot_sessions_created_at", "copilot_sessions", ["created_at"])

    op.create_table(
        "copilot_interactions",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("session_id", postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("query", sa.Text(), nullable=False),
        sa.Column("response", sa.Text(), nullable=True),
        sa.Column("context", sa.JSON(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["session_id"], ["copilot_sessions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_copilot_interactions_session_id", "copilot_interactions", ["session_id"])
    op.create_index("ix_copilot_interactions_user_id", "copilot_interactions", ["user_id"])
    op.create_index("ix_copilot_interactions_created_at", "copilot_interactions", ["created_at"])

    # SEO
    op.create_table(
        "seo_projects",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("domain", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("industry", sa.String(length=255), nullable=True),
        sa.Column("target_audience", sa.String(length=500), nullable=True),
        sa.Column("brand_tone", sa.String(length=100), nullable=True),
        sa.Column("primary_language", sa.String(length=10), nullable=False, server_default="en"),
        sa.Column("project_type", sa.String(length=50), nullable=False, server_default="blog"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_seo_projects_user_id", "seo_projects", ["user_id"])
    op.create_index("ix_seo_projects_created_at", "seo_projects", ["created_at"])

    op.create_table(
        "project_knowledge",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("project_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["project_id"], ["seo_projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_project_knowledge_project_id", "project_knowledge", ["project_id"])
    op.create_index("ix_project_knowledge_created_at", "project_knowledge", ["created_at"])

    op.create_table(
        "seo_articles",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("project_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("slug", sa.String(length=500), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("content_html", sa.Text(), nullable=True),
        sa.Column("meta_title", sa.String(length=500), nullable=True),
        sa.Column("meta_description", sa.String(length=500), nullable=True),
        sa.Column("language", sa.String(length=10), nullable=False, server_default="en"),
        sa.Column("keywords", sa.JSON(), nullable=True),
        sa.Column("target_keyword", sa.String(length=255), nullable=False),
        sa.Column("word_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reading_time", sa.String(length=50), nullable=True),
        sa.Column("has_table_of_contents", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("has_faq", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("internal_links_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("external_links_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("images_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="draft"),
        sa.Column("ai_model", sa.String(length=100), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["project_id"], ["seo_projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_seo_articles_project_id", "seo_articles", ["project_id"])
    op.create_index("ix_seo_articles_slug", "seo_articles", ["slug"])
    op.create_index("ix_seo_articles_status", "seo_articles", ["status"])
    op.create_index("ix_seo_articles_created_at", "seo_articles", ["created_at"])

    op.create_table(
        "article_quality_checks",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("article_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("plagiarism_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("grammar_errors", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("readability_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("seo_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("e_e_a_t_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("passed", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["article_id"], ["seo_articles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_article_quality_checks_article_id", "article_quality_checks", ["article_id"]
    )
    op.create_index(
        "ix_article_quality_checks_created_at", "article_quality_checks", ["created_at"]
    )


def downgrade() -> None:
    op.drop_table("article_quality_checks")
    op.drop_table("seo_articles")
    op.drop_table("project_knowledge")
    op.drop_table("seo_projects")
    op.drop_table("copilot_interactions")
    op.drop_table("copilot_sessions")
    op.drop_table("messages")
    op.drop_table("conversations")
