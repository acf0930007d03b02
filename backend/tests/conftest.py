"""
Pytest configuration and shared fixtures for backend tests.
"""

import os
import sys
from pathlib import Path

# Test configuration must be in place before settings are first loaded
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("RUN_SEEDS", "false")

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

import pytest
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Import after path is set
from core.domain import AdminUser, Article
from core.security import PasswordHasher, TokenService
from infrastructure.config import get_settings
from infrastructure.database.connection import get_db
from infrastructure.database.models import Base
from infrastructure.database.repositories import (
    SQLAlchemyAdminUserRepository,
    SQLAlchemyArticleRepository,
)

# Low bcrypt cost keeps fixtures fast; production cost is covered in test_security
password_hasher = PasswordHasher(rounds=4)
settings = get_settings()
token_service = TokenService(secret_key=settings.jwt_secret_key)

ADMIN_PASSWORD = "adminpassword123"

# Database URL for testing (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def db_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def article_repository(db_session: AsyncSession) -> SQLAlchemyArticleRepository:
    return SQLAlchemyArticleRepository(db_session)


@pytest.fixture
def admin_user_repository(db_session: AsyncSession) -> SQLAlchemyAdminUserRepository:
    return SQLAlchemyAdminUserRepository(db_session)


@pytest.fixture
async def admin_user(admin_user_repository: SQLAlchemyAdminUserRepository) -> AdminUser:
    """Create a test admin account."""
    return await admin_user_repository.create(
        AdminUser(
            email="admin@example.com",
            password_hash=password_hasher.hash(ADMIN_PASSWORD),
            name="Test Admin",
        )
    )


@pytest.fixture
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest.fixture
def tokens() -> TokenService:
    """Token service signing with the application secret."""
    return token_service


@pytest.fixture
def admin_token(admin_user: AdminUser) -> str:
    return token_service.create_session_token(admin_user.id, admin_user.email)


@pytest.fixture
def auth_headers(admin_token: str) -> dict:
    """Bearer header for API-client style requests."""
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def auth_cookie_headers(admin_token: str) -> dict:
    """Session cookie the way a browser sends it."""
    return {"Cookie": f"{settings.cookie_name}={admin_token}"}


@pytest.fixture
async def published_article(article_repository: SQLAlchemyArticleRepository) -> Article:
    return await article_repository.create(
        Article(
            title="Forest Walks",
            content="Notes from the morning trail.",
            author="Jane Doe",
            published=True,
        )
    )


@pytest.fixture
async def draft_article(article_repository: SQLAlchemyArticleRepository) -> Article:
    return await article_repository.create(
        Article(
            title="Unfinished Draft",
            content="Work in progress.",
            author="Jane Doe",
            published=False,
        )
    )


@pytest.fixture
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client for testing."""
    # Import app here so the environment above is applied first
    from main import app

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    # Reset rate limiter state between tests to prevent cross-test 429s
    app.state.limiter.reset()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
