"""FastAPI application factory, lifespan and error handlers."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1 import api_router
from app.core.config import Settings, get_settings
from app.core.enums import ErrorCode
from app.core.errors import AuthAPIError, AuthError, InternalError, ValidationError
from app.core.security import build_password_hasher, build_token_codec
from app.db.base import Base
from app.db.session import build_engine, build_session_maker
from app.models import User  # noqa: F401 - register models on Base.metadata

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: create tables if configured; shutdown: dispose the engine."""
    engine = app.state.engine
    if app.state.settings.create_tables_on_startup:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AuthAPIError)
    async def handle_api_error(request: Request, exc: AuthAPIError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
        return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        logger.info("Malformed body on %s %s: %s", request.method, request.url.path, exc.errors())
        error = ValidationError(ErrorCode.MALFORMED_BODY)
        return JSONResponse(status_code=error.status_code, content=error.to_body())

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        error = InternalError()
        return JSONResponse(status_code=error.status_code, content=error.to_body())


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Collaborators are built from explicit settings so tests can swap them
    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = build_session_maker(engine)
    app.state.password_hasher = build_password_hasher(settings)
    app.state.token_codec = build_token_codec(settings)

    # CORS: everything in debug, otherwise only CORS_ORIGINS (comma-separated)
    cors_origins = ["*"] if settings.debug else settings.cors_origin_list
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=not settings.debug,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    prefix = settings.api_v1_prefix

    @app.get("/")
    def root():
        return {
            "message": f"{settings.app_name} is running",
            "endpoints": {
                "register": f"POST {prefix}/auth/register",
                "login": f"POST {prefix}/auth/login",
                "profile": f"GET {prefix}/profile (requires token)",
            },
        }

    app.include_router(api_router, prefix=prefix)
    return app


app = create_application()
