"""Logging configuration: one stdout handler, uvicorn routed through it, health checks muted."""

import logging
import logging.config
from typing import Any, Dict


class HealthCheckAccessFilter(logging.Filter):
    """Drop uvicorn access records for GET requests under ``health_path``.

    uvicorn passes access records as ``(client, method, path, http_version, status)``.
    """

    def __init__(self, health_path: str = "/api/v1/health") -> None:
        super().__init__()
        self.health_path = health_path.rstrip("/")

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name != "uvicorn.access" or not isinstance(record.args, tuple) or len(record.args) < 3:
            return True
        method, path = record.args[1], str(record.args[2])
        is_health_check = path == self.health_path or path.startswith(self.health_path + "/")
        return not (method == "GET" and is_health_check)


def get_logging_config(level: str = "INFO", health_path: str = "/api/v1/health") -> Dict[str, Any]:
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "health_checks": {"()": HealthCheckAccessFilter, "health_path": health_path},
        },
        "formatters": {
            "default": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
            "access": {"format": "%(message)s"},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
                "filters": ["health_checks"],
            },
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": level, "propagate": False},
            "uvicorn.error": {"handlers": ["default"], "level": level, "propagate": False},
            "uvicorn.access": {"handlers": ["access"], "level": level, "propagate": False},
            "app": {"handlers": ["default"], "level": level, "propagate": False},
        },
        "root": {"level": level, "handlers": ["default"]},
    }


def configure_logging(level: str = "INFO", health_path: str = "/api/v1/health") -> None:
    logging.config.dictConfig(get_logging_config(level, health_path))
