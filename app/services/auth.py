"""Registration and authentication flows."""

from __future__ import annotations

import logging

from starlette.concurrency import run_in_threadpool

from app.core.constants import (
    EMAIL_PATTERN,
    LOGIN_REQUIRED_MESSAGE,
    MIN_PASSWORD_LENGTH,
    REGISTER_REQUIRED_MESSAGE,
)
from app.core.enums import ErrorCode
from app.core.errors import AuthAPIError, AuthError, ConflictError, InternalError, ValidationError
from app.core.security import PasswordHasher, TokenCodec
from app.models.user import User
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)


def validate_registration(name: str | None, email: str | None, password: str | None) -> None:
    """Raise ``ValidationError`` for the first rule the input breaks."""
    if not name or not email or not password:
        raise ValidationError(ErrorCode.MISSING_FIELDS, REGISTER_REQUIRED_MESSAGE)
    if EMAIL_PATTERN.fullmatch(email) is None:
        raise ValidationError(ErrorCode.INVALID_EMAIL)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(ErrorCode.WEAK_PASSWORD)


def token_claims(user: User) -> dict:
    """Identity snapshot embedded in an access token."""
    return {"id": user.id, "email": user.email, "name": user.name}


class AuthService:
    """Registration and login over a credential store, a password hasher and a token codec.

    Business-rule failures are raised as ``AuthAPIError`` subclasses. Anything
    else a collaborator raises is logged here and replaced by ``InternalError``.
    """

    def __init__(self, store: UserStore, hasher: PasswordHasher, codec: TokenCodec) -> None:
        self.store = store
        self.hasher = hasher
        self.codec = codec

    async def register(self, name: str | None, email: str | None, password: str | None) -> User:
        validate_registration(name, email, password)
        try:
            if await self.store.get_by_email(email) is not None:
                raise ConflictError()
            password_hash = await run_in_threadpool(self.hasher.hash, password)
            user = await self.store.create(name=name, email=email, password_hash=password_hash)
        except AuthAPIError as exc:
            logger.info("Registration rejected: %s", exc.code.value)
            raise
        except Exception as exc:
            logger.exception("Registration failed")
            raise InternalError() from exc

        logger.info("Registered user %s", user.id)
        return user

    async def login(self, email: str | None, password: str | None) -> tuple[str, User]:
        """Return ``(token, user)`` for valid credentials.

        Unknown email and wrong password raise the same ``AuthError``; the
        unknown-email path still pays for one hash verification.
        """
        if not email or not password:
            raise ValidationError(ErrorCode.MISSING_FIELDS, LOGIN_REQUIRED_MESSAGE)
        try:
            user = await self.store.get_by_email(email)
            if user is None:
                await run_in_threadpool(self.hasher.dummy_verify)
                raise AuthError(ErrorCode.INVALID_CREDENTIALS, reason="unknown_email")
            if not await run_in_threadpool(self.hasher.verify, password, user.password_hash):
                raise AuthError(ErrorCode.INVALID_CREDENTIALS, reason="wrong_password")
            token = self.codec.issue(token_claims(user))
        except AuthError as exc:
            logger.info("Login rejected: %s", exc.reason)
            raise
        except Exception as exc:
            logger.exception("Login failed")
            raise InternalError() from exc

        logger.info("User %s logged in", user.id)
        return token, user
