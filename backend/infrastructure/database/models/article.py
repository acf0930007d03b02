"""
Article database model.
"""

from sqlalchemy import Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, SoftDeleteMixin, TimestampMixin


class Article(Base, TimestampMixin, SoftDeleteMixin):
    """Blog article model."""

    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Content
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Publish state
    published: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    __table_args__ = (
        Index("ix_articles_published_created", "published", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Article(id={self.id}, title={self.title[:30]}, published={self.published})>"
