"""
API dependencies: service wiring and admin session authentication.
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security.utils import get_authorization_scheme_param
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.admin_user import AdminUser
from core.exceptions import AuthenticationError
from core.security.password import PasswordHasher
from core.security.tokens import TokenService
from infrastructure.config.settings import settings
from infrastructure.database.connection import get_db
from infrastructure.database.repositories import (
    SQLAlchemyAdminUserRepository,
    SQLAlchemyArticleRepository,
)
from services.article_service import ArticleService
from services.auth_service import AuthService

password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)

token_service = TokenService(
    secret_key=settings.jwt_secret_key,
    algorithm=settings.jwt_algorithm,
    expire_hours=settings.jwt_expire_hours,
)


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_token_service() -> TokenService:
    return token_service


def get_article_service(db: AsyncSession = Depends(get_db)) -> ArticleService:
    return ArticleService(SQLAlchemyArticleRepository(db))


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(SQLAlchemyAdminUserRepository(db), hasher, tokens)


async def get_current_admin(
    request: Request,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> AdminUser:
    """
    Dependency resolving the session to an admin account.

    The HttpOnly session cookie is checked first; API clients may send the
    same token as ``Authorization: Bearer <token>`` instead.
    """
    token = request.cookies.get(settings.cookie_name)
    if not token and authorization:
        scheme, credentials = get_authorization_scheme_param(authorization)
        if scheme.lower() == "bearer":
            token = credentials.strip() or None

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return await auth_service.get_user_from_token(token)
    except AuthenticationError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )


CurrentAdmin = Annotated[AdminUser, Depends(get_current_admin)]
ArticleServiceDep = Annotated[ArticleService, Depends(get_article_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
