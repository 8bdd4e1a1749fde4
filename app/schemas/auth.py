"""Auth Pydantic schemas — requests, user projection, token claims and responses."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Requests ─────────────────────────────────────────────────────────────
# Fields are optional so that missing values reach the flows and come back
# as 400 missing_fields rather than FastAPI's 422.

class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


# ── Responses ────────────────────────────────────────────────────────────

class UserRead(BaseModel):
    """Public projection of a user: never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class CredentialClaim(BaseModel):
    """Decoded access-token payload."""

    id: int
    email: str
    name: str
    iat: int = Field(..., description="Issued at (UNIX seconds)")
    exp: int = Field(..., description="Expires at (UNIX seconds)")


class RegisterResponse(BaseModel):
    message: str
    user: UserRead


class LoginResponse(BaseModel):
    message: str
    token: str
    user: UserRead


class ProfileResponse(BaseModel):
    message: str
    user: CredentialClaim


class ErrorResponse(BaseModel):
    error: str
