"""
SQLAlchemy database models.
"""

from .admin_user import AdminUser
from .article import Article
from .base import Base, SoftDeleteMixin, TimestampMixin

__all__ = [
    "Base",
    "TimestampMixin",
    "SoftDeleteMixin",
    "Article",
    "AdminUser",
]
