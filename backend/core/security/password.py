"""
Password hashing utilities using bcrypt.
"""

import secrets

from passlib.context import CryptContext

DEFAULT_BCRYPT_ROUNDS = 14


class PasswordHasher:
    """Password hashing and verification using bcrypt."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )
        self._dummy_hash: str | None = None

    def hash(self, password: str) -> str:
        """
        Hash a password using bcrypt.

        Args:
            password: Plain text password to hash

        Returns:
            Hashed password string
        """
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against a hash.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Hashed password to check against

        Returns:
            True if password matches, False otherwise (including when the
            stored hash is empty or malformed)
        """
        if not hashed_password:
            return False
        try:
            return self._context.verify(plain_password, hashed_password)
        except ValueError:
            return False

    def needs_rehash(self, hashed_password: str) -> bool:
        """
        Check if a password hash needs to be rehashed.

        True when the hash was produced with a different cost than the one
        this hasher is configured with.
        """
        return self._context.needs_update(hashed_password)

    def dummy_hash(self) -> str:
        """
        Hash of a random secret at this hasher's cost, built once and reused.

        Verifying against it costs the same as verifying a real account's
        hash, so a login for an unknown email takes as long as one for a
        known email with a wrong password.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash(secrets.token_urlsafe(16))
        return self._dummy_hash
