from __future__ import annotations

import logging
from typing import Any

import openai
from openai import AsyncOpenAI

from mssgpt.core.errors import ProviderError
from mssgpt.core.settings import Settings, get_settings
from mssgpt.models.chat import ChatMessage

logger = logging.getLogger(__name__)

CHAT_TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 1000

IMAGE_MODEL = "dall-e-3"
IMAGE_SIZE = "1024x1024"
IMAGE_QUALITY = "hd"
IMAGE_STYLE = "vivid"


def provider_error(e: openai.APIError) -> ProviderError:
    """Translate an SDK error into a ProviderError carrying its status and message."""
    message = None
    if isinstance(e.body, dict):
        message = e.body.get("message")
    message = message or e.message or "Unknown error"

    status_code = getattr(e, "status_code", None) or 500
    return ProviderError(f"OpenAI API error: {message}", status_code=status_code)


class OpenAIService:
    def __init__(self, settings: Settings | None = None, client: Any | None = None):
        self._settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        # Built on first use so that a missing key fails the call, not startup.
        if self._client is None:
            if not self._settings.openai_api_key:
                raise RuntimeError("OPENAI_API_KEY is not configured")
            self._client = AsyncOpenAI(
                api_key=self._settings.openai_api_key,
                base_url=self._settings.openai_base_url,
            )
        return self._client

    async def generate_chat_response(self, model: str, messages: list[ChatMessage]) -> str:
        try:
            completion = await self.client.chat.completions.create(
                model=model,
                messages=[msg.to_provider() for msg in messages],
                temperature=CHAT_TEMPERATURE,
                max_tokens=CHAT_MAX_TOKENS,
            )
        except openai.APIError as e:
            logger.exception("OpenAI chat completion failed (model=%s)", model)
            raise provider_error(e) from e

        return completion.choices[0].message.content or ""

    async def generate_image(self, prompt: str) -> str:
        try:
            response = await self.client.images.generate(
                model=IMAGE_MODEL,
                prompt=prompt,
                n=1,
                size=IMAGE_SIZE,
                quality=IMAGE_QUALITY,
                style=IMAGE_STYLE,
            )
        except openai.APIError as e:
            logger.exception("OpenAI image generation failed")
            raise provider_error(e) from e

        return response.data[0].url or ""
