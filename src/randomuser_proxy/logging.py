"""Centralized logging configuration for the RandomUser proxy."""

from __future__ import annotations

import logging
from logging.config import dictConfig

_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        }
    },
    "loggers": {
        "uvicorn": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "uvicorn.error": {"handlers": ["console"], "level": "INFO", "propagate": False},
        "uvicorn.access": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        "httpx": {"level": "WARNING"},
        "randomuser_proxy": {"handlers": ["console"], "level": "INFO", "propagate": False},
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging once."""

    config = dict(_LOGGING_CONFIG)
    loggers = {name: dict(options) for name, options in _LOGGING_CONFIG["loggers"].items()}
    loggers["randomuser_proxy"]["level"] = level.upper()
    config["loggers"] = loggers
    config["root"] = {"level": level.upper(), "handlers": ["console"]}
    dictConfig(config)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger within the randomuser_proxy hierarchy."""

    full_name = f"randomuser_proxy.{name}" if name else "randomuser_proxy"
    return logging.getLogger(full_name)
