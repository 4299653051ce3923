from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from mssgpt.core.errors import InvalidRequestError

Mode = Literal["chat", "image"]
MODES: tuple[str, ...] = ("chat", "image")

DEFAULT_MODEL = "gpt-4o"


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str
    type: Literal["text", "image"] = "text"
    model: str | None = None

    def to_provider(self) -> dict[str, str]:
        # The provider only understands role/content; type and model are view metadata.
        return {"role": self.role, "content": self.content}


_MESSAGES = TypeAdapter(list[ChatMessage])


class ChatRequest(BaseModel):
    messages: list[ChatMessage] = Field(min_length=1)
    mode: Mode
    model: str = DEFAULT_MODEL


class ChatResponse(BaseModel):
    content: str
    role: Literal["assistant"] = "assistant"
    type: Literal["image"] | None = None


def parse_chat_request(payload: Any, default_model: str = DEFAULT_MODEL) -> ChatRequest:
    """
    Validate a raw JSON body into a ChatRequest.

    Message shape is checked before the mode, so a body that is wrong on both
    counts reports "Invalid messages format".
    """
    messages = payload.get("messages") if isinstance(payload, dict) else None
    if not isinstance(messages, list) or not messages:
        raise InvalidRequestError("Invalid messages format")

    try:
        _MESSAGES.validate_python(messages)
    except ValidationError as e:
        raise InvalidRequestError("Invalid messages format") from e

    if payload.get("mode") not in MODES:
        raise InvalidRequestError("Invalid mode")

    data = dict(payload)
    if data.get("model") in (None, ""):
        data["model"] = default_model

    try:
        return ChatRequest.model_validate(data)
    except ValidationError as e:
        fields = {err["loc"][0] for err in e.errors() if err["loc"]}
        if fields == {"model"}:
            raise InvalidRequestError("Invalid model") from e
        raise InvalidRequestError("Invalid messages format") from e
