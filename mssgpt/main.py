"""Application entry point: ``uvicorn mssgpt.main:app``."""

from fastapi import FastAPI

from mssgpt.api import chat, health
from mssgpt.core.errors import register_exception_handlers
from mssgpt.core.logging import configure_logging
from mssgpt.core.settings import get_settings


def create_app() -> FastAPI:
    """Relay API only: ``POST /api/chat`` and ``GET /health``."""
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name, version="0.1.0")
    register_exception_handlers(app)

    app.include_router(chat.router, prefix="/api", tags=["chat"])
    app.include_router(health.router, tags=["health"])

    return app


def create_web_app() -> FastAPI:
    """API plus the NiceGUI chat page; the page mount is process-wide, so build this once."""
    app = create_app()
    settings = get_settings()
    if settings.ui_enabled:
        from mssgpt.view.page import mount_chat_view

        mount_chat_view(app, settings)
    return app


app = create_web_app()
