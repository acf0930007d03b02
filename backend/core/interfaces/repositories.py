"""Repository interfaces for data access."""

from abc import ABC, abstractmethod

from ..domain.admin_user import AdminUser
from ..domain.article import Article


class ArticleRepository(ABC):
    """Abstract repository for Article entities.

    Implementations never return soft-deleted rows and raise
    ``NotFoundError`` when a single lookup misses.
    """

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with id and timestamps."""
        ...

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article:
        """Get article by ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """List every article, newest first."""
        ...

    @abstractmethod
    async def get_recent(self, limit: int) -> list[Article]:
        """The newest ``limit`` articles, drafts included."""
        ...

    @abstractmethod
    async def get_published(self) -> list[Article]:
        """List published articles, newest first."""
        ...

    @abstractmethod
    async def get_by_author(self, author: str) -> list[Article]:
        """List articles written by an author, newest first."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Update an existing article."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> None:
        """Soft-delete an article."""
        ...

    @abstractmethod
    async def count(self, published: bool | None = None) -> int:
        """Count articles, optionally filtered by publish state."""
        ...


class AdminUserRepository(ABC):
    """Abstract repository for AdminUser entities."""

    @abstractmethod
    async def get_by_email(self, email: str) -> AdminUser:
        """Get admin by email (case-insensitive)."""
        ...

    @abstractmethod
    async def get_by_id(self, user_id: int) -> AdminUser:
        """Get admin by ID."""
        ...

    @abstractmethod
    async def create(self, user: AdminUser) -> AdminUser:
        """Create a new admin. Raises ConflictError on duplicate email."""
        ...

    @abstractmethod
    async def update(self, user: AdminUser) -> AdminUser:
        """Update an existing admin."""
        ...

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Soft-delete an admin."""
        ...

    @abstractmethod
    async def list_all(self) -> list[AdminUser]:
        """List all admins."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Count admins."""
        ...
