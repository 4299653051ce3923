from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RelayError(Exception):
    """Base error rendered to clients as ``{"error": message}``."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidRequestError(RelayError):
    """The request body does not have the expected shape."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class ProviderError(RelayError):
    """The upstream provider rejected the call."""


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    logger.info(
        "%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message
    )
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RelayError, relay_error_handler)
