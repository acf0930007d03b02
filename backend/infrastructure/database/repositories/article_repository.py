"""SQLAlchemy implementation of the article repository."""

import logging

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.article import Article
from core.exceptions import NotFoundError
from core.interfaces.repositories import ArticleRepository
from infrastructure.database.models.article import Article as ArticleModel
from infrastructure.database.models.base import utcnow

logger = logging.getLogger(__name__)


def _to_entity(row: ArticleModel) -> Article:
    return Article(
        id=row.id,
        title=row.title,
        content=row.content,
        author=row.author,
        published=row.published,
        created_at=row.created_at,
        updated_at=row.updated_at,
        deleted_at=row.deleted_at,
    )


class SQLAlchemyArticleRepository(ArticleRepository):
    """Article persistence over an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _live(self):
        return select(ArticleModel).where(ArticleModel.deleted_at.is_(None))

    @staticmethod
    def _newest_first(query):
        return query.order_by(ArticleModel.created_at.desc(), ArticleModel.id.desc())

    async def _get_row(self, article_id: int) -> ArticleModel:
        result = await self.db.execute(self._live().where(ArticleModel.id == article_id))
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError("Article not found")
        return row

    async def create(self, article: Article) -> Article:
        row = ArticleModel(
            title=article.title,
            content=article.content,
            author=article.author,
            published=article.published,
        )
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        logger.debug("Created article %s", row.id)
        return _to_entity(row)

    async def get_by_id(self, article_id: int) -> Article:
        return _to_entity(await self._get_row(article_id))

    async def get_all(self) -> list[Article]:
        result = await self.db.execute(self._newest_first(self._live()))
        return [_to_entity(row) for row in result.scalars().all()]

    async def get_recent(self, limit: int) -> list[Article]:
        result = await self.db.execute(self._newest_first(self._live()).limit(limit))
        return [_to_entity(row) for row in result.scalars().all()]

    async def get_published(self) -> list[Article]:
        query = self._live().where(ArticleModel.published.is_(True))
        result = await self.db.execute(self._newest_first(query))
        return [_to_entity(row) for row in result.scalars().all()]

    async def get_by_author(self, author: str) -> list[Article]:
        query = self._live().where(ArticleModel.author == author)
        result = await self.db.execute(self._newest_first(query))
        return [_to_entity(row) for row in result.scalars().all()]

    async def update(self, article: Article) -> Article:
        if article.id is None:
            raise NotFoundError("Article not found")
        row = await self._get_row(article.id)
        row.title = article.title
        row.content = article.content
        row.author = article.author
        row.published = article.published
        # Set explicitly: onupdate skips rows whose columns are unchanged
        row.updated_at = utcnow()
        await self.db.commit()
        await self.db.refresh(row)
        return _to_entity(row)

    async def delete(self, article_id: int) -> None:
        result = await self.db.execute(
            update(ArticleModel)
            .where(ArticleModel.id == article_id, ArticleModel.deleted_at.is_(None))
            .values(deleted_at=utcnow())
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise NotFoundError("Article not found")
        await self.db.commit()
        logger.info("Soft-deleted article %s", article_id)

    async def count(self, published: bool | None = None) -> int:
        query = select(func.count(ArticleModel.id)).where(ArticleModel.deleted_at.is_(None))
        if published is not None:
            query = query.where(ArticleModel.published.is_(published))
        result = await self.db.execute(query)
        return result.scalar_one()
