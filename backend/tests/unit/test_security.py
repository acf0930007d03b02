"""
Unit tests for password hashing and session tokens.
"""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from core.security.password import PasswordHasher
from core.security.tokens import TokenService

SECRET = "unit-test-secret-key-with-enough-length"


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret_key=SECRET)


class TestPasswordHasher:
    """Tests for bcrypt hashing."""

    def test_hash_is_not_plaintext(self, hasher: PasswordHasher):
        hashed = hasher.hash("s3cret-password")
        assert hashed != "s3cret-password"
        assert hashed.startswith("$2b$")

    def test_verify_correct_password(self, hasher: PasswordHasher):
        hashed = hasher.hash("s3cret-password")
        assert hasher.verify("s3cret-password", hashed) is True

    def test_verify_wrong_password(self, hasher: PasswordHasher):
        hashed = hasher.hash("s3cret-password")
        assert hasher.verify("other-password", hashed) is False

    def test_same_password_hashes_differently(self, hasher: PasswordHasher):
        """Each hash gets its own salt."""
        assert hasher.hash("repeatable") != hasher.hash("repeatable")

    def test_verify_rejects_empty_or_malformed_hash(self, hasher: PasswordHasher):
        assert hasher.verify("anything", "") is False
        assert hasher.verify("anything", "not-a-bcrypt-hash") is False

    def test_default_cost_is_14(self):
        """Production hashes carry cost 14 in their prefix."""
        hashed = PasswordHasher().hash("testpassword")
        assert hashed.startswith("$2b$14$")

    def test_needs_rehash_when_cost_differs(self, hasher: PasswordHasher):
        weak = hasher.hash("password")
        assert PasswordHasher(rounds=5).needs_rehash(weak) is True
        assert hasher.needs_rehash(weak) is False

    def test_dummy_hash_built_once_at_hasher_cost(self, hasher: PasswordHasher):
        first = hasher.dummy_hash()
        assert first.startswith("$2b$04$")
        assert hasher.dummy_hash() is first
        assert hasher.verify("guess", first) is False


class TestTokenService:
    """Tests for HS256 session tokens."""

    def test_token_has_three_segments(self, tokens: TokenService):
        token = tokens.create_session_token(1, "test@example.com")
        assert len(token.split(".")) == 3

    def test_round_trip_claims(self, tokens: TokenService):
        token = tokens.create_session_token(42, "admin@example.com")
        payload = tokens.verify_session_token(token)

        assert payload is not None
        assert payload.user_id == 42
        assert payload.email == "admin@example.com"
        assert payload.type == "session"

    def test_expiry_is_24_hours(self, tokens: TokenService):
        token = tokens.create_session_token(1, "test@example.com")
        payload = tokens.decode_token(token)

        expected = datetime.now(UTC) + timedelta(hours=24)
        assert abs((payload.exp - expected).total_seconds()) < 60
        assert tokens.expire_seconds == 24 * 3600

    def test_signed_with_hs256(self, tokens: TokenService):
        token = tokens.create_session_token(1, "test@example.com")
        assert jwt.get_unverified_header(token)["alg"] == "HS256"

    def test_expired_token_rejected(self):
        expired = TokenService(secret_key=SECRET, expire_hours=-1)
        token = expired.create_session_token(1, "test@example.com")
        assert expired.verify_session_token(token) is None

    def test_wrong_secret_rejected(self, tokens: TokenService):
        other = TokenService(secret_key="a-completely-different-secret-key")
        token = other.create_session_token(1, "test@example.com")
        assert tokens.verify_session_token(token) is None

    def test_garbage_rejected(self, tokens: TokenService):
        assert tokens.verify_session_token("invalid.token.here") is None
        assert tokens.decode_token("") is None

    def test_token_without_type_claim_rejected(self, tokens: TokenService):
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "1", "exp": now + timedelta(hours=1), "iat": now},
            SECRET,
            algorithm="HS256",
        )
        assert tokens.decode_token(token) is None

    def test_non_numeric_subject_rejected(self, tokens: TokenService):
        token = tokens.create_session_token("not-a-number", "test@example.com")
        assert tokens.decode_token(token) is not None
        assert tokens.verify_session_token(token) is None

    def test_tokens_for_same_user_verify_independently(self, tokens: TokenService):
        first = tokens.verify_session_token(tokens.create_session_token(7, "a@example.com"))
        second = tokens.verify_session_token(tokens.create_session_token(7, "a@example.com"))
        assert first.user_id == second.user_id == 7
