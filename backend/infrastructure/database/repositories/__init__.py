"""Repository implementations backed by SQLAlchemy."""

from .admin_user_repository import SQLAlchemyAdminUserRepository
from .article_repository import SQLAlchemyArticleRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyAdminUserRepository",
]
