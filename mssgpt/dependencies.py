"""FastAPI dependencies shared by the routers.

The provider service is cached for the process, so every request reuses one
SDK client; tests swap it out through ``app.dependency_overrides``.
"""

from __future__ import annotations

from functools import lru_cache

from mssgpt.core.settings import get_settings
from mssgpt.services.openai_service import OpenAIService


@lru_cache
def get_openai_service() -> OpenAIService:
    return OpenAIService(settings=get_settings())
