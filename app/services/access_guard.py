"""Access guard: turn an Authorization header into verified identity claims."""

import logging
from typing import Any

import jwt

from app.core.constants import BEARER_SCHEME
from app.core.enums import ErrorCode, GuardRejection
from app.core.errors import AuthError
from app.core.security import TokenCodec

logger = logging.getLogger(__name__)


def _reject(reason: GuardRejection) -> AuthError:
    logger.info("Access denied: %s", reason.value)
    return AuthError(ErrorCode.UNAUTHORIZED, reason=reason.value)


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token from ``Bearer <token>``.

    The header must split on single spaces into exactly two parts, the
    first being literally ``Bearer``.
    """
    if not authorization:
        raise _reject(GuardRejection.NO_TOKEN)
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME:
        raise _reject(GuardRejection.MALFORMED_TOKEN)
    return parts[1]


def authorize(authorization: str | None, codec: TokenCodec) -> dict[str, Any]:
    """Verify the header's token (signature and expiry) and return its claims.

    Every rejection is the same ``AuthError``; only ``reason`` differs.
    """
    token = extract_bearer_token(authorization)
    try:
        return codec.decode(token)
    except jwt.InvalidTokenError as exc:
        logger.debug("Token verification failed: %s", exc)
        raise _reject(GuardRejection.INVALID_OR_EXPIRED_TOKEN) from exc
