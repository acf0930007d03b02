"""
Admin authentication use cases.
"""

import logging
from dataclasses import dataclass

from core.domain.admin_user import AdminUser
from core.exceptions import AuthenticationError, NotFoundError, ValidationError
from core.interfaces.repositories import AdminUserRepository
from core.security.password import PasswordHasher
from core.security.tokens import TokenService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "invalid credentials"


@dataclass
class LoginResult:
    token: str
    user: AdminUser


class AuthService:
    """Email/password login and session token resolution."""

    def __init__(
        self,
        admin_users: AdminUserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.admin_users = admin_users
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Check credentials and issue a session token.

        Raises:
            ValidationError: email or password missing
            AuthenticationError: unknown email or wrong password (same message)
        """
        if not email or not password:
            raise ValidationError("email and password are required")

        try:
            user = await self.admin_users.get_by_email(email)
        except NotFoundError:
            user = None

        password_ok = self.password_hasher.verify(
            password,
            user.password_hash if user else self.password_hasher.dummy_hash(),
        )
        if user is None or not password_ok:
            logger.info("Rejected login attempt for %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self.token_service.create_session_token(user.id, user.email)
        logger.info("Admin %s logged in", user.id)
        return LoginResult(token=token, user=user)

    async def get_user_from_token(self, token: str) -> AdminUser:
        """Resolve a session token to a live admin account."""
        payload = self.token_service.verify_session_token(token) if token else None
        if payload is None:
            raise AuthenticationError("Invalid token")
        try:
            return await self.admin_users.get_by_id(payload.user_id)
        except NotFoundError as e:
            raise AuthenticationError("Invalid token") from e

    async def create_admin(self, email: str, password: str, name: str) -> AdminUser:
        """Hash the password and persist a new admin account."""
        if not email or not password:
            raise ValidationError("email and password are required")
        if not name:
            raise ValidationError("name is required")
        return await self.admin_users.create(
            AdminUser(
                email=email,
                password_hash=self.password_hasher.hash(password),
                name=name,
            )
        )
