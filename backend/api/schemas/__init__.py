"""API request/response schemas."""

from .admin import DashboardResponse, DashboardStatsResponse
from .article import (
    AdminArticleCreateRequest,
    ArticleCreateRequest,
    ArticleResponse,
    ArticleUpdateRequest,
)
from .auth import AdminUserResponse, LoginRequest, LoginResponse, MeResponse, MessageResponse

__all__ = [
    "AdminArticleCreateRequest",
    "AdminUserResponse",
    "ArticleCreateRequest",
    "ArticleResponse",
    "ArticleUpdateRequest",
    "DashboardResponse",
    "DashboardStatsResponse",
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    "MessageResponse",
]
