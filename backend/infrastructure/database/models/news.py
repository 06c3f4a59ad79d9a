"""
News models: discovered articles, their rewrites and journalist styles.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Index, Integer, String, Text, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class NewsStatus(str, Enum):
    """Lifecycle of a discovered news article."""

    DISCOVERED = "discovered"
    REWRITTEN = "rewritten"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class NewsArticle(Base, TimestampMixin):
    """A news item discovered through search, scored for virality and revenue."""

    __tablename__ = "news_articles"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    user_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Source
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    original_content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    source_url: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    source_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    published_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    keywords: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    niche: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Scores
    viral_score: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    revenue_score: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    trending_potential: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    estimated_reach: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    status: Mapped[str] = mapped_column(
        String(50),
        default=NewsStatus.DISCOVERED.value,
        nullable=False,
        index=True,
    )

    rewrites: Mapped[List["ArticleRewrite"]] = relationship(
        "ArticleRewrite",
        back_populates="article",
        cascade="all, delete-orphan",
    )

    __table_args__ = (Index("ix_news_articles_user_created", "user_id", "created_at"),)

    def __repr__(self) -> str:
        return f"<NewsArticle(id={self.id}, title={self.title[:30]}, status={self.status})>"


class JournalistStyle(Base, TimestampMixin):
    """A named writing persona that rewrites follow."""

    __tablename__ = "journalist_styles"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    user_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tone: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    style_characteristics: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    example_text: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Writing samples the style was trained on
    training_text_1: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    training_text_2: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    training_text_3: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    usage_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def __repr__(self) -> str:
        return f"<JournalistStyle(id={self.id}, name={self.name}, default={self.is_default})>"

    @property
    def training_texts(self) -> list[str]:
        return [
            t for t in (self.training_text_1, self.training_text_2, self.training_text_3) if t
        ]


class ArticleRewrite(Base, TimestampMixin):
    """A rewrite of a news article in a journalist style."""

    __tablename__ = "article_rewrites"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    article_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("news_articles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    journalist_style_id: Mapped[Optional[str]] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("journalist_styles.id", ondelete="SET NULL"),
        nullable=True,
    )

    rewritten_content: Mapped[str] = mapped_column(Text, nullable=False)
    style_applied: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    tone_adjustment: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Metrics
    readability_score: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    engagement_potential: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    word_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    reading_time_minutes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    improvement_score: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    suggestions: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)

    ai_model: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    article: Mapped["NewsArticle"] = relationship("NewsArticle", back_populates="rewrites")

    def __repr__(self) -> str:
        return f"<ArticleRewrite(id={self.id}, article_id={self.article_id})>"
