"""
Revenue performance of published content.
"""

from uuid import uuid4

from sqlalchemy import Float, ForeignKey, Index, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class ArticlePerformance(Base, TimestampMixin):
    """Traffic, revenue split and cost of a single piece of content."""

    __tablename__ = "article_performance"

    # Primary key
    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    # Owner
    user_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    status: Mapped[str] = mapped_column(String(50), default="draft", nullable=False)

    # Traffic
    views: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Revenue by source
    revenue_total: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    revenue_adsense: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    revenue_affiliate: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    revenue_sponsored: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)

    # Economics
    roi: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    generation_cost: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)

    __table_args__ = (Index("ix_article_performance_user_created", "user_id", "created_at"),)

    def __repr__(self) -> str:
        return f"<ArticlePerformance(title={self.title[:30]!r}, revenue={self.revenue_total})>"
