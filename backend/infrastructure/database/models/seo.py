"""
SEO models: projects, brand knowledge, generated articles and quality checks.
"""

from typing import List, Optional
from uuid import uuid4

from sqlalchemy import Boolean, Float, ForeignKey, Integer, String, Text, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class SEOArticleStatus:
    DRAFT = "draft"
    REVIEW = "review"
    PUBLISHED = "published"


class SEOProject(Base, TimestampMixin):
    """A site or brand the user generates SEO content for."""

    __tablename__ = "seo_projects"

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
    domain: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    industry: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    target_audience: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    brand_tone: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    primary_language: Mapped[str] = mapped_column(String(10), default="en", nullable=False)
    project_type: Mapped[str] = mapped_column(String(50), default="blog", nullable=False)

    knowledge: Mapped[List["KnowledgeEntry"]] = relationship(
        "KnowledgeEntry",
        back_populates="project",
        cascade="all, delete-orphan",
    )
    articles: Mapped[List["SEOArticle"]] = relationship(
        "SEOArticle",
        back_populates="project",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<SEOProject(id={self.id}, name={self.name})>"


class KnowledgeEntry(Base, TimestampMixin):
    """Brand knowledge injected into article prompts."""

    __tablename__ = "project_knowledge"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    project_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("seo_projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    project: Mapped["SEOProject"] = relationship("SEOProject", back_populates="knowledge")


class SEOArticle(Base, TimestampMixin):
    """An AI-generated, SEO-structured article."""

    __tablename__ = "seo_articles"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    project_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("seo_projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    slug: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    content_html: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    meta_title: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    meta_description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    language: Mapped[str] = mapped_column(String(10), default="en", nullable=False)
    keywords: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    target_keyword: Mapped[str] = mapped_column(String(255), nullable=False)

    word_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    reading_time: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    has_table_of_contents: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    has_faq: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    internal_links_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    external_links_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    images_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    status: Mapped[str] = mapped_column(
        String(50),
        default=SEOArticleStatus.DRAFT,
        nullable=False,
        index=True,
    )
    ai_model: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    project: Mapped["SEOProject"] = relationship("SEOProject", back_populates="articles")
    quality_checks: Mapped[List["QualityCheck"]] = relationship(
        "QualityCheck",
        back_populates="article",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<SEOArticle(id={self.id}, slug={self.slug}, status={self.status})>"


class QualityCheck(Base, TimestampMixin):
    """Automated quality evaluation of an SEO article."""

    __tablename__ = "article_quality_checks"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    article_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("seo_articles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    plagiarism_score: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    grammar_errors: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    readability_score: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    seo_score: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    e_e_a_t_score: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    passed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    article: Mapped["SEOArticle"] = relationship("SEOArticle", back_populates="quality_checks")
