# Interfaces (Abstract Contracts)
# Infrastructure implements these interfaces
from .repositories import AdminUserRepository, ArticleRepository

__all__ = [
    "ArticleRepository",
    "AdminUserRepository",
]
