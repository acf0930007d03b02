from .connection import (
    DatabaseConnectionError,
    async_session_maker,
    close_db,
    engine,
    get_db,
    get_db_context,
    init_db,
)
from .models.base import Base

__all__ = [
    "Base",
    "DatabaseConnectionError",
    "engine",
    "async_session_maker",
    "get_db",
    "get_db_context",
    "init_db",
    "close_db",
]
