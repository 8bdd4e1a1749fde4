"""Error taxonomy shared by the flows, the access guard and the HTTP layer.

Every failure the API reports is one of four kinds. Each instance carries a
machine-readable code (logged), an HTTP status and a message that is safe to
show to the caller. Exception handlers in ``app.main`` render them as
``{"error": message}``.
"""

from __future__ import annotations

from app.core.enums import ErrorCode

# MISSING_FIELDS has no default: each flow passes its own wording from app.core.constants
_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_EMAIL: "Invalid email format",
    ErrorCode.WEAK_PASSWORD: "Password must be at least 6 characters long",
    ErrorCode.MALFORMED_BODY: "Malformed request body",
    ErrorCode.EMAIL_TAKEN: "Email already registered",
    ErrorCode.INVALID_CREDENTIALS: "Invalid credentials",
    ErrorCode.UNAUTHORIZED: "Invalid or missing authentication token",
    ErrorCode.INTERNAL_ERROR: "Internal server error",
}


class AuthAPIError(Exception):
    """Base class for every error the API turns into a response."""

    status_code: int = 500

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        self.code = code
        self.message = message or _MESSAGES[code]
        super().__init__(self.message)

    def to_body(self) -> dict[str, str]:
        return {"error": self.message}


class ValidationError(AuthAPIError):
    """Client sent incomplete or malformed input."""

    status_code = 400


class ConflictError(AuthAPIError):
    """Uniqueness violation (email already registered)."""

    status_code = 409

    def __init__(self, message: str | None = None) -> None:
        super().__init__(ErrorCode.EMAIL_TAKEN, message)


class AuthError(AuthAPIError):
    """Credential or token failure.

    ``reason`` is for logs only; the message never depends on it.
    """

    status_code = 401

    def __init__(self, code: ErrorCode, reason: str | None = None) -> None:
        super().__init__(code)
        self.reason = reason or code.value


class InternalError(AuthAPIError):
    """Unexpected collaborator failure. The caller only sees a generic message."""

    status_code = 500

    def __init__(self) -> None:
        super().__init__(ErrorCode.INTERNAL_ERROR)
