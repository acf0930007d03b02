"""
Service layer for business logic.
"""

from services.article_service import ArticleService, Dashboard, DashboardStats
from services.auth_service import AuthService, LoginResult

__all__ = [
    "ArticleService",
    "AuthService",
    "Dashboard",
    "DashboardStats",
    "LoginResult",
]
