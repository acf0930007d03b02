"""
Admin dashboard schemas.
"""

from pydantic import BaseModel, ConfigDict

from .article import ArticleResponse


class DashboardStatsResponse(BaseModel):
    total_articles: int
    published_articles: int
    draft_articles: int

    model_config = ConfigDict(from_attributes=True)


class DashboardResponse(BaseModel):
    stats: DashboardStatsResponse
    recent_articles: list[ArticleResponse]

    model_config = ConfigDict(from_attributes=True)
