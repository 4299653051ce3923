"""Process-wide logging setup, applied once by ``create_app``."""

from __future__ import annotations

import logging

from mssgpt.core.settings import Settings

# Client libraries whose request logs would otherwise echo every relay and provider call.
HTTP_CLIENT_LOGGERS = ("httpx", "httpcore", "openai")


def _level(name: str | None, default: int = logging.INFO) -> int:
    return getattr(logging, (name or "").upper(), default)


def configure_logging(settings: Settings) -> None:
    level = _level(settings.log_level)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)

    http_level = _level(settings.http_log_level, logging.WARNING)
    for name in HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
