"""Process entry point: run the API under uvicorn.

    python -m app.server
"""

import logging

import uvicorn

from app.core.config import get_settings
from app.core.logging import configure_logging, get_logging_config

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    health_path = f"{settings.api_v1_prefix}/health"
    configure_logging(settings.log_level, health_path)

    base = f"http://localhost:{settings.port}"
    prefix = settings.api_v1_prefix
    logger.info("Starting %s on port %s", settings.app_name, settings.port)
    logger.info("POST %s%s/auth/register", base, prefix)
    logger.info("POST %s%s/auth/login", base, prefix)
    logger.info("GET  %s%s/profile", base, prefix)

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
        log_config=get_logging_config(settings.log_level, health_path),
    )


if __name__ == "__main__":
    main()
