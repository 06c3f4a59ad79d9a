"""
User database model.

A user row doubles as the account profile: plan, credit balances,
revenue totals and the preferences learned by the copilot live here.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from sqlalchemy import DateTime, Float, Index, Integer, String, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class UserRole(str, Enum):
    """User roles enumeration."""

    USER = "user"
    ADMIN = "admin"


class UserStatus(str, Enum):
    """User account status enumeration."""

    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"


class SubscriptionTier(str, Enum):
    """Pricing plan enumeration."""

    FREE = "free"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class User(Base, TimestampMixin):
    """User account and profile model."""

    __tablename__ = "users"

    # Primary key
    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    # Basic info
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Authentication
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(50),
        default=UserRole.USER.value,
        nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(50),
        default=UserStatus.ACTIVE.value,
        nullable=False,
    )

    # Plan and credits
    plan: Mapped[str] = mapped_column(
        String(50),
        default=SubscriptionTier.FREE.value,
        nullable=False,
    )
    credits_balance: Mapped[int] = mapped_column(Integer, default=100, nullable=False)
    credits_used_today: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Lifetime revenue attributed to the user's content
    total_revenue_generated: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)

    # Learned copilot preferences
    copilot_preferences: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    """
    Structure:
    {
        "favorite_niches": ["tech", "finance"],
        "preferred_style": "investigative",
        "avoid_styles": ["casual"],
        "last_positive_interaction": "2025-01-15T12:00:00+00:00"
    }
    """

    # Login tracking
    last_login: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    login_count: Mapped[int] = mapped_column(default=0, nullable=False)

    __table_args__ = (
        Index("ix_users_email_status", "email", "status"),
        Index("ix_users_plan", "plan"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, plan={self.plan})>"

    @property
    def is_active(self) -> bool:
        """Check if user account is active."""
        return self.status == UserStatus.ACTIVE.value
