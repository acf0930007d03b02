"""
Public article API routes.

Readers only ever see published articles here; drafts are reachable
through the admin routes.
"""

import logging

from fastapi import APIRouter, Query, status

from api.dependencies import ArticleServiceDep
from api.schemas.article import ArticleCreateRequest, ArticleResponse
from core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=list[ArticleResponse])
async def list_published_articles(service: ArticleServiceDep):
    """List published articles, newest first."""
    return await service.get_published_articles()


@router.get("/by-author", response_model=list[ArticleResponse])
async def list_articles_by_author(
    service: ArticleServiceDep,
    author: str = Query("", description="Exact author name"),
):
    """List published articles written by an author."""
    articles = await service.get_articles_by_author(author)
    return [article for article in articles if article.published]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_published_article(article_id: int, service: ArticleServiceDep):
    """Get a single published article. Drafts are reported as missing."""
    article = await service.get_article(article_id)
    if not article.published:
        raise NotFoundError("Article not found")
    return article


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(data: ArticleCreateRequest, service: ArticleServiceDep):
    """Submit a new article. It stays unpublished until an admin publishes it."""
    return await service.create_article(data.title, data.content, data.author)
