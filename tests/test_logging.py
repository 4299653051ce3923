import logging

from mssgpt.core.logging import HTTP_CLIENT_LOGGERS, configure_logging
from mssgpt.core.settings import Settings


def test_http_client_loggers_follow_their_own_level():
    settings = Settings(_env_file=None, LOG_LEVEL="DEBUG", HTTP_LOG_LEVEL="error")

    configure_logging(settings)

    assert logging.getLogger("uvicorn.error").level == logging.DEBUG
    for name in HTTP_CLIENT_LOGGERS:
        assert logging.getLogger(name).level == logging.ERROR


def test_unknown_level_names_fall_back():
    settings = Settings(_env_file=None, LOG_LEVEL="chatty", HTTP_LOG_LEVEL="nope")

    configure_logging(settings)

    assert logging.getLogger("uvicorn.access").level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING
