"""
SQLAlchemy database models.
"""

from .base import Base, TimestampMixin
from .copilot import Conversation, CopilotInteraction, CopilotSession, Message
from .news import ArticleRewrite, JournalistStyle, NewsArticle, NewsStatus
from .revenue import ArticlePerformance
from .seo import KnowledgeEntry, QualityCheck, SEOArticle, SEOArticleStatus, SEOProject
from .user import SubscriptionTier, User, UserRole, UserStatus

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "UserRole",
    "UserStatus",
    "SubscriptionTier",
    "NewsArticle",
    "NewsStatus",
    "ArticleRewrite",
    "JournalistStyle",
    "Conversation",
    "Message",
    "CopilotSession",
    "CopilotInteraction",
    "SEOProject",
    "KnowledgeEntry",
    "SEOArticle",
    "SEOArticleStatus",
    "QualityCheck",
    "ArticlePerformance",
]
