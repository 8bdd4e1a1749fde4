"""Auth endpoints — register and login."""

from typing import Optional

from fastapi import APIRouter, Depends

from app.api.deps import get_auth_service
from app.core.constants import LOGIN_SUCCESS_MESSAGE, REGISTER_SUCCESS_MESSAGE
from app.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserRead,
)
from app.services.auth import AuthService

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def register(
    payload: Optional[RegisterRequest] = None,
    service: AuthService = Depends(get_auth_service),
):
    """Create a user. The response never contains the password or its hash."""
    payload = payload or RegisterRequest()
    user = await service.register(payload.name, payload.email, payload.password)
    return RegisterResponse(message=REGISTER_SUCCESS_MESSAGE, user=UserRead.model_validate(user))


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def login(
    payload: Optional[LoginRequest] = None,
    service: AuthService = Depends(get_auth_service),
):
    """Exchange email + password for a 24h bearer token."""
    payload = payload or LoginRequest()
    token, user = await service.login(payload.email, payload.password)
    return LoginResponse(
        message=LOGIN_SUCCESS_MESSAGE,
        token=token,
        user=UserRead.model_validate(user),
    )
