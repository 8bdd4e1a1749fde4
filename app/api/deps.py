"""Shared FastAPI dependencies: collaborators from app.state, the auth service and the access guard."""

from typing import Any, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import PasswordHasher, TokenCodec
from app.db.session import get_db
from app.services.access_guard import authorize
from app.services.auth import AuthService
from app.services.user_store import UserStore


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.token_codec


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    codec: TokenCodec = Depends(get_token_codec),
) -> AuthService:
    return AuthService(UserStore(db), hasher, codec)


def require_identity(
    authorization: Optional[str] = Header(None),
    codec: TokenCodec = Depends(get_token_codec),
) -> dict[str, Any]:
    """Access guard for identity-requiring routes.

    Usage in route functions:
        claims: dict = Depends(require_identity)
    """
    return authorize(authorization, codec)
