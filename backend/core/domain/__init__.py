# Domain Entities
# Pure business objects with no external dependencies
from .admin_user import AdminUser
from .article import Article

__all__ = [
    "AdminUser",
    "Article",
]
