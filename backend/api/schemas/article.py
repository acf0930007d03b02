"""
Article request and response schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ArticleCreateRequest(BaseModel):
    """Public article creation. Articles always start unpublished."""

    title: str = Field(..., min_length=1, max_length=500)
    content: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1, max_length=255)


class AdminArticleCreateRequest(ArticleCreateRequest):
    """Admin article creation; may publish immediately."""

    published: bool = False


class ArticleUpdateRequest(BaseModel):
    """Partial update. Omitted or empty fields keep their current value."""

    title: Optional[str] = Field(None, max_length=500)
    content: Optional[str] = None
    author: Optional[str] = Field(None, max_length=255)
    published: Optional[bool] = None


class ArticleResponse(BaseModel):
    """Article as returned to clients."""

    id: int
    title: str
    content: str
    author: str
    published: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
