"""
Admin API routes: dashboard and full article management.

Every route requires an authenticated admin session.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import ArticleServiceDep, CurrentAdmin, get_current_admin
from api.schemas.admin import DashboardResponse
from api.schemas.article import (
    AdminArticleCreateRequest,
    ArticleResponse,
    ArticleUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(service: ArticleServiceDep):
    """Article counts by publish state plus the five newest articles."""
    return await service.dashboard()


@router.get("/articles", response_model=list[ArticleResponse])
async def list_all_articles(
    service: ArticleServiceDep,
    author: Optional[str] = Query(None, description="Filter by exact author name"),
):
    """List every article, drafts included."""
    if author is not None:
        return await service.get_articles_by_author(author)
    return await service.get_all_articles()


@router.get("/articles/{article_id}", response_model=ArticleResponse)
async def get_article(article_id: int, service: ArticleServiceDep):
    return await service.get_article(article_id)


@router.post("/articles", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: AdminArticleCreateRequest,
    service: ArticleServiceDep,
    admin: CurrentAdmin,
):
    """Create an article, publishing it right away when requested."""
    article = await service.create_article(data.title, data.content, data.author)
    if data.published:
        article = await service.publish_article(article.id)
    logger.info("Admin %s created article %s", admin.id, article.id)
    return article


@router.put("/articles/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    data: ArticleUpdateRequest,
    service: ArticleServiceDep,
):
    return await service.update_article(
        article_id,
        title=data.title,
        content=data.content,
        author=data.author,
        published=data.published,
    )


@router.post("/articles/{article_id}/publish", response_model=ArticleResponse)
async def publish_article(article_id: int, service: ArticleServiceDep):
    return await service.publish_article(article_id)


@router.post("/articles/{article_id}/unpublish", response_model=ArticleResponse)
async def unpublish_article(article_id: int, service: ArticleServiceDep):
    return await service.unpublish_article(article_id)


@router.delete("/articles/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: int,
    service: ArticleServiceDep,
    admin: CurrentAdmin,
) -> Response:
    """Soft-delete an article."""
    await service.delete_article(article_id)
    logger.info("Admin %s deleted article %s", admin.id, article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
