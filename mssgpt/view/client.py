from __future__ import annotations

import logging
from typing import Any

import httpx

from mssgpt.models.chat import ChatMessage, ChatResponse, Mode

logger = logging.getLogger(__name__)


class RelayClient:
    """HTTP client for ``POST /api/chat``."""

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        path: str = "/api/chat",
    ):
        self._base_url = base_url
        self._transport = transport
        self._path = path

    async def send(self, messages: list[ChatMessage], mode: Mode, model: str) -> ChatResponse:
        """
        Post the conversation and return the relay's reply.

        Raises ``httpx.HTTPError`` on transport failures and on non-2xx
        statuses, and ``ValueError`` when the body is not a valid reply.
        """
        payload: dict[str, Any] = {
            "messages": [msg.model_dump(exclude_none=True) for msg in messages],
            "mode": mode,
            "model": model,
        }

        # No timeout beyond the transport default; the image call can be slow.
        async with httpx.AsyncClient(
            base_url=self._base_url, transport=self._transport, timeout=None
        ) as client:
            response = await client.post(self._path, json=payload)

        if response.is_error:
            logger.warning(
                "Relay returned %s: %s", response.status_code, response.text[:500]
            )
        response.raise_for_status()
        return ChatResponse.model_validate(response.json())
