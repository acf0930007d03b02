"""
JWT session token service for admin authentication.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

SESSION_TOKEN_TYPE = "session"


@dataclass
class TokenPayload:
    """JWT token payload structure."""

    sub: str  # Subject (admin user ID)
    exp: datetime  # Expiration time
    iat: datetime  # Issued at
    type: str
    email: str | None = None

    @property
    def user_id(self) -> int:
        return int(self.sub)


class TokenService:
    """Service for creating and validating signed session tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_hours: int = 24,
    ):
        """
        Initialize the token service.

        Args:
            secret_key: Secret key for signing tokens
            algorithm: JWT algorithm (default: HS256)
            expire_hours: Session lifetime in hours
        """
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_hours = expire_hours

    @property
    def expire_seconds(self) -> int:
        return self._expire_hours * 3600

    def create_session_token(self, user_id: int | str, email: str | None = None) -> str:
        """
        Create a session token for an admin user.

        Args:
            user_id: Admin ID to encode in the token
            email: Email to include as a claim

        Returns:
            Encoded JWT
        """
        now = datetime.now(UTC)
        expire = now + timedelta(hours=self._expire_hours)

        payload = {
            "sub": str(user_id),
            "exp": expire,
            "iat": now,
            "type": SESSION_TOKEN_TYPE,
        }
        if email is not None:
            payload["email"] = email

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_token(self, token: str) -> TokenPayload | None:
        """
        Decode and validate a JWT token.

        Returns:
            TokenPayload if valid, None if invalid, expired or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
            )

            for field in ("sub", "exp", "type"):
                if field not in payload:
                    raise JWTError(f"Missing required field: {field}")

            return TokenPayload(
                sub=payload["sub"],
                exp=datetime.fromtimestamp(payload["exp"], tz=UTC),
                iat=datetime.fromtimestamp(payload.get("iat", 0), tz=UTC),
                type=payload["type"],
                email=payload.get("email"),
            )
        except JWTError:
            return None

    def verify_session_token(self, token: str) -> TokenPayload | None:
        """
        Verify a session token.

        Returns:
            TokenPayload if valid session token with a numeric subject, None otherwise
        """
        payload = self.decode_token(token)
        if not payload or payload.type != SESSION_TOKEN_TYPE:
            return None
        if not payload.sub.isdigit():
            return None
        return payload
