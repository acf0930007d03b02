"""
Article use cases.

Field validation and publish-state transitions live here; persistence is
delegated to an ArticleRepository.
"""

import logging
from dataclasses import dataclass, field

from core.domain.article import Article
from core.exceptions import ValidationError
from core.interfaces.repositories import ArticleRepository

logger = logging.getLogger(__name__)

RECENT_ARTICLES_LIMIT = 5


@dataclass
class DashboardStats:
    total_articles: int
    published_articles: int
    draft_articles: int


@dataclass
class Dashboard:
    stats: DashboardStats
    recent_articles: list[Article] = field(default_factory=list)


def _require_valid_id(article_id: int) -> None:
    if article_id is None or article_id <= 0:
        raise ValidationError("invalid article ID")


class ArticleService:
    """Create, read, update, publish and delete articles."""

    def __init__(self, articles: ArticleRepository):
        self.articles = articles

    async def create_article(self, title: str, content: str, author: str) -> Article:
        """Create an unpublished article. Title, content and author are required."""
        title, content, author = (title or "").strip(), (content or "").strip(), (author or "").strip()
        if not title:
            raise ValidationError("title is required")
        if not content:
            raise ValidationError("content is required")
        if not author:
            raise ValidationError("author is required")

        article = await self.articles.create(
            Article(title=title, content=content, author=author, published=False)
        )
        logger.info("Article %s created by %s", article.id, author)
        return article

    async def get_article(self, article_id: int) -> Article:
        _require_valid_id(article_id)
        return await self.articles.get_by_id(article_id)

    async def get_all_articles(self) -> list[Article]:
        return await self.articles.get_all()

    async def get_published_articles(self) -> list[Article]:
        return await self.articles.get_published()

    async def get_articles_by_author(self, author: str) -> list[Article]:
        author = (author or "").strip()
        if not author:
            raise ValidationError("author is required")
        return await self.articles.get_by_author(author)

    async def update_article(
        self,
        article_id: int,
        title: str | None = None,
        content: str | None = None,
        author: str | None = None,
        published: bool | None = None,
    ) -> Article:
        """
        Apply a partial update.

        Empty or missing text fields keep their current value. ``published``
        is only changed when it is given.
        """
        _require_valid_id(article_id)
        article = await self.articles.get_by_id(article_id)
        article.apply_changes(
            title=(title or "").strip(),
            content=(content or "").strip(),
            author=(author or "").strip(),
            published=published,
        )
        return await self.articles.update(article)

    async def publish_article(self, article_id: int) -> Article:
        _require_valid_id(article_id)
        article = await self.articles.get_by_id(article_id)
        article.publish()
        article = await self.articles.update(article)
        logger.info("Article %s published", article_id)
        return article

    async def unpublish_article(self, article_id: int) -> Article:
        _require_valid_id(article_id)
        article = await self.articles.get_by_id(article_id)
        article.unpublish()
        article = await self.articles.update(article)
        logger.info("Article %s unpublished", article_id)
        return article

    async def delete_article(self, article_id: int) -> None:
        _require_valid_id(article_id)
        await self.articles.delete(article_id)

    async def dashboard(self, recent_limit: int = RECENT_ARTICLES_LIMIT) -> Dashboard:
        """Publish-state counts plus the newest articles."""
        total = await self.articles.count()
        published = await self.articles.count(published=True)
        recent = await self.articles.get_recent(recent_limit)
        return Dashboard(
            stats=DashboardStats(
                total_articles=total,
                published_articles=published,
                draft_articles=total - published,
            ),
            recent_articles=recent,
        )
