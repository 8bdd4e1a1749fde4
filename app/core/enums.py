"""Shared enums for errors and the access guard."""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable error codes, one per failure the API can report."""

    MISSING_FIELDS = "missing_fields"
    INVALID_EMAIL = "invalid_email"
    WEAK_PASSWORD = "weak_password"
    MALFORMED_BODY = "malformed_body"
    EMAIL_TAKEN = "email_taken"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHORIZED = "unauthorized"
    INTERNAL_ERROR = "internal_error"


class GuardRejection(str, Enum):
    """Why the access guard turned a request away (logged, never returned)."""

    NO_TOKEN = "no_token"
    MALFORMED_TOKEN = "malformed_token"
    INVALID_OR_EXPIRED_TOKEN = "invalid_or_expired_token"
