"""Security utilities: password hashing (passlib/bcrypt) and JWT access tokens (PyJWT)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from app.core.config import Settings

logger = logging.getLogger(__name__)


class PasswordHasher:
    """One-way salted password hashing backed by a bcrypt ``CryptContext``."""

    def __init__(self, rounds: int = 10) -> None:
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plain: str) -> str:
        return self.context.hash(plain)

    def verify(self, plain: str, hashed: str) -> bool:
        try:
            return self.context.verify(plain, hashed)
        except ValueError:
            # Stored value is not a hash this context recognises
            logger.warning("Stored password hash could not be identified")
            return False

    def dummy_verify(self) -> None:
        """Spend the time of a real verification when there is nothing to verify against."""
        self.context.dummy_verify()


class TokenCodec:
    """Signs claim sets into bearer tokens and verifies them.

    Every token carries ``iat`` and ``exp`` as integer UNIX seconds, and
    ``exp - iat`` always equals ``ttl_seconds``.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", ttl_seconds: int = 86400) -> None:
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl_seconds = ttl_seconds

    def issue(self, claims: dict[str, Any], now: datetime | None = None) -> str:
        issued_at = int((now or datetime.now(timezone.utc)).timestamp())
        payload = {**claims, "iat": issued_at, "exp": issued_at + self.ttl_seconds}
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """Verify signature and expiry and return the claims.

        Raises ``jwt.InvalidTokenError`` (or a subclass such as
        ``jwt.ExpiredSignatureError``) when the token is not acceptable.
        """
        return jwt.decode(
            token,
            self._secret,
            algorithms=[self.algorithm],
            # iat is required but not compared with the local clock
            options={"require": ["exp", "iat"], "verify_iat": False},
        )


def build_password_hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def build_token_codec(settings: Settings) -> TokenCodec:
    return TokenCodec(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl_seconds=settings.access_token_expire_seconds,
    )
