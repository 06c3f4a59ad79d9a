"""Create news, journalist style, rewrite and performance tables

Revision ID: 002
Revises: 001
Create Date: 2026-06-02

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: str | None = "001"
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
    op.create_table(
        "news_articles",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("original_content", sa.Text(), nullable=True),
        sa.Column("source_url", sa.String(length=1000), nullable=True),
        sa.Column("source_name", sa.String(length=255), nullable=True),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("keywords", sa.JSON(), nullable=True),
        sa.Column("niche", sa.String(length=255), nullable=True),
        sa.Column("viral_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("revenue_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("trending_potential", sa.Float(), nullable=False, server_default="0"),
        sa.Column("estimated_reach", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="discovered"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_news_articles_user_id", "news_articles", ["user_id"])
    op.create_index("ix_news_articles_status", "news_articles", ["status"])
    op.create_index("ix_news_articles_created_at", "news_articles", ["created_at"])
    op.create_index("ix_news_articles_user_created", "news_articles", ["user_id", "created_at"])

    op.create_table(
        "journalist_styles",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("tone", sa.String(length=100), nullable=True),
        sa.Column("style_characteristics", sa.JSON(), nullable=True),
        sa.Column("example_text", sa.Text(), nullable=True),
        sa.Column("training_text_1", sa.Text(), nullable=True),
        sa.Column("training_text_2", sa.Text(), nullable=True),
        sa.Column("training_text_3", sa.Text(), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("usage_count", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_journalist_styles_user_id", "journalist_styles", ["user_id"])
    op.create_index("ix_journalist_styles_created_at", "journalist_styles", ["created_at"])

    op.create_table(
        "article_rewrites",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("article_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("journalist_style_id", postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column("rewritten_content", sa.Text(), nullable=False),
        sa.Column("style_applied", sa.String(length=255), nullable=True),
        sa.Column("tone_adjustment", sa.String(length=255), nullable=True),
        sa.Column("readability_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("engagement_potential", sa.String(length=50), nullable=True),
        sa.Column("word_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reading_time_minutes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("improvement_score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("suggestions", sa.JSON(), nullable=True),
        sa.Column("ai_model", sa.String(length=100), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["article_id"], ["news_articles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["journalist_style_id"], ["journalist_styles.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_article_rewrites_article_id", "article_rewrites", ["article_id"])
    op.create_index("ix_article_rewrites_created_at", "article_rewrites", ["created_at"])

    op.create_table(
        "article_performance",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="draft"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("revenue_total", sa.Float(), nullable=False, server_default="0"),
        sa.Column("revenue_adsense", sa.Float(), nullable=False, server_default="0"),
        sa.Column("revenue_affiliate", sa.Float(), nullable=False, server_default="0"),
        sa.Column("revenue_sponsored", sa.Float(), nullable=False, server_default="0"),
        sa.Column("roi", sa.Float(), nullable=False, server_default="0"),
        sa.Column("generation_cost", sa.Float(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_article_performance_user_id", "article_performance", ["user_id"])
    op.create_index("ix_article_performance_created_at", "article_performance", ["created_at"])
    op.create_index(
        "ix_article_performance_user_created", "article_performance", ["user_id", "created_at"]
    )


def downgrade() -> None:
    op.drop_table("article_performance")
    op.drop_table("article_rewrites")
    op.drop_table("journalist_styles")
    op.drop_table("news_articles")
