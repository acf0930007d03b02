"""Database connection and session management."""
import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import get_settings
from .models.base import Base

logger = logging.getLogger(__name__)

settings = get_settings()


class DatabaseConnectionError(RuntimeError):
    """Raised when the database stays unreachable after every retry."""


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine; pool sizing only applies to server databases."""
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=echo)

    connect_args = {"ssl": "require"} if settings.is_production else {}
    return create_async_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=10,
        pool_recycle=3600,
        connect_args=connect_args,
    )


engine = build_engine(settings.database_url, echo=settings.database_echo)

# Session factory
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting database sessions."""
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """Context manager for database sessions outside of a request (startup seeding)."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db(
    db_engine: AsyncEngine | None = None,
    max_retries: int | None = None,
    retry_interval: float | None = None,
) -> None:
    """Create tables, retrying at a fixed interval while the database is unreachable."""
    db_engine = db_engine or engine
    max_retries = max(1, max_retries or settings.db_max_retries)
    retry_interval = settings.db_retry_interval_seconds if retry_interval is None else retry_interval

    last_error: Exception | None = None
    for attempt in range(1, max_retries + 1):
        logger.info("Attempting to connect to database (attempt %d/%d)", attempt, max_retries)
        try:
            async with db_engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database connected and migrated successfully")
            return
        except (DBAPIError, OSError) as e:
            last_error = e
            if attempt < max_retries:
                logger.warning(
                    "Failed to connect to database: %s. Retrying in %.0f seconds...",
                    e,
                    retry_interval,
                )
                await asyncio.sleep(retry_interval)

    raise DatabaseConnectionError(
        f"failed to connect to database after {max_retries} attempts: {last_error}"
    ) from last_error


async def close_db() -> None:
    """Close database connections."""
    await engine.dispose()
