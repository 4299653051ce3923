from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Protocol

from mssgpt.models.chat import DEFAULT_MODEL, ChatMessage, ChatResponse, Mode

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Sorry, I encountered an error. Please try again."
IMAGE_ALT = "Generated image"
MORE_MODELS_LABEL = "More models"

PLACEHOLDERS: dict[str, str] = {
    "chat": "Message ChatGPT...",
    "image": "Describe the image you want to generate...",
}

DISCLAIMERS: dict[str, str] = {
    "chat": "ChatGPT can make mistakes. Check important info.",
    "image": "AI-generated images may vary from your description.",
}


@dataclass(frozen=True)
class ModelOption:
    id: str
    name: str
    description: str


AVAILABLE_MODELS: tuple[ModelOption, ...] = (
    ModelOption("gpt-4o", "GPT-4o", "Great for most tasks"),
    ModelOption("o3", "o3", "Uses advanced reasoning"),
    ModelOption("o4-mini", "o4-mini", "Fastest at advanced reasoning"),
    ModelOption("o4-mini-high", "o4-mini-high", "Great at coding and visual reasoning"),
)


class Relay(Protocol):
    async def send(self, messages: list[ChatMessage], mode: Mode, model: str) -> ChatResponse: ...


class ChatView:
    """
    State and actions of one chat page.

    Rendering lives elsewhere; ``on_change`` is awaited after every state
    change so the page can refresh itself.
    """

    def __init__(
        self,
        relay: Relay,
        on_change: Callable[[], Awaitable[None] | None] | None = None,
    ):
        self.relay = relay
        self.on_change = on_change

        self.messages: list[ChatMessage] = []
        self.input = ""
        self.is_loading = False
        self.mode: Mode = "chat"
        self.selected_model = DEFAULT_MODEL
        self.show_model_dropdown = False

    @property
    def placeholder(self) -> str:
        return PLACEHOLDERS[self.mode]

    @property
    def disclaimer(self) -> str:
        return DISCLAIMERS[self.mode]

    @property
    def selected_model_name(self) -> str:
        for option in AVAILABLE_MODELS:
            if option.id == self.selected_model:
                return option.name
        return self.selected_model

    @property
    def can_submit(self) -> bool:
        return not self.is_loading and bool(self.input.strip())

    async def _changed(self) -> None:
        if self.on_change is None:
            return
        result = self.on_change()
        if result is not None:
            await result

    async def submit(self) -> bool:
        """Send the current input. Returns False when the submit was ignored."""
        if not self.can_submit:
            return False

        model = self.selected_model
        self.messages.append(ChatMessage(role="user", content=self.input, model=model))
        self.input = ""
        self.is_loading = True

        try:
            await self._changed()
            reply = await self.relay.send(list(self.messages), self.mode, model)
            self.messages.append(
                ChatMessage(
                    role=reply.role,
                    content=reply.content,
                    type=reply.type or "text",
                    model=model,
                )
            )
        except Exception:
            logger.exception("Chat request failed")
            self.messages.append(
                ChatMessage(role="assistant", content=FALLBACK_REPLY, model=model)
            )
        finally:
            self.is_loading = False

        await self._changed()
        return True

    async def handle_key_down(self, key: str, shift_key: bool = False) -> bool:
        """Enter submits; Shift+Enter is left to the textarea as a newline."""
        if key != "Enter" or shift_key:
            return False
        return await self.submit()

    async def clear(self) -> None:
        self.messages = []
        await self._changed()

    async def set_mode(self, mode: Mode) -> None:
        if mode not in PLACEHOLDERS:
            raise ValueError(f"Unknown mode: {mode}")
        self.mode = mode
        await self._changed()

    async def toggle_model_dropdown(self) -> None:
        self.show_model_dropdown = not self.show_model_dropdown
        await self._changed()

    async def select_model(self, model_id: str) -> None:
        self.selected_model = model_id
        self.show_model_dropdown = False
        await self._changed()
