"""Identity-gated endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from app.api.deps import require_identity
from app.core.constants import PROFILE_MESSAGE
from app.schemas.auth import ErrorResponse, ProfileResponse

router = APIRouter()


@router.get("", response_model=ProfileResponse, responses={401: {"model": ErrorResponse}})
async def get_profile(claims: dict[str, Any] = Depends(require_identity)):
    """Return the caller's identity as carried by their token."""
    return {"message": PROFILE_MESSAGE, "user": claims}
