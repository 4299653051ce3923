from types import SimpleNamespace

import anyio
import httpx
import openai
import pytest

from mssgpt.core.errors import ProviderError
from mssgpt.models.chat import ChatMessage
from mssgpt.services.openai_service import OpenAIService

REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


class _FakeCompletions:
    def __init__(self, content="Hello", error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class _FakeImages:
    def __init__(self, url="https://x/img.png", error=None):
        self.url = url
        self.error = error
        self.calls = []

    async def generate(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return SimpleNamespace(data=[SimpleNamespace(url=self.url)])


def _service(completions=None, images=None) -> OpenAIService:
    client = SimpleNamespace(
        chat=SimpleNamespace(completions=completions or _FakeCompletions()),
        images=images or _FakeImages(),
    )
    return OpenAIService(client=client)


def test_chat_request_parameters():
    completions = _FakeCompletions(content="Hello")
    service = _service(completions=completions)
    messages = [
        ChatMessage(role="user", content="hi", model="o3"),
        ChatMessage(role="assistant", content="https://x/a.png", type="image", model="o3"),
    ]

    text = anyio.run(service.generate_chat_response, "o3", messages)

    assert text == "Hello"
    assert completions.calls == [
        {
            "model": "o3",
            "messages": [
                {"role": "user", "content": "hi"},
                {"role": "assistant", "content": "https://x/a.png"},
            ],
            "temperature": 0.7,
            "max_tokens": 1000,
        }
    ]


def test_chat_null_content_becomes_empty_string():
    service = _service(completions=_FakeCompletions(content=None))

    text = anyio.run(service.generate_chat_response, "gpt-4o", [ChatMessage(role="user", content="hi")])

    assert text == ""


def test_image_request_parameters():
    images = _FakeImages(url="https://x/img.png")
    service = _service(images=images)

    url = anyio.run(service.generate_image, "a red fox")

    assert url == "https://x/img.png"
    assert images.calls == [
        {
            "model": "dall-e-3",
            "prompt": "a red fox",
            "n": 1,
            "size": "1024x1024",
            "quality": "hd",
            "style": "vivid",
        }
    ]


def test_status_error_keeps_status_and_message():
    error = openai.RateLimitError(
        "rate limited", response=httpx.Response(429, request=REQUEST), body=None
    )
    service = _service(completions=_FakeCompletions(error=error))

    with pytest.raises(ProviderError) as exc_info:
        anyio.run(service.generate_chat_response, "gpt-4o", [ChatMessage(role="user", content="hi")])

    assert exc_info.value.status_code == 429
    assert exc_info.value.message == "OpenAI API error: rate limited"


def test_error_body_message_is_preferred():
    error = openai.BadRequestError(
        "Error code: 400",
        response=httpx.Response(400, request=REQUEST),
        body={"message": "Your prompt was rejected", "type": "invalid_request_error"},
    )
    service = _service(images=_FakeImages(error=error))

    with pytest.raises(ProviderError) as exc_info:
        anyio.run(service.generate_image, "something")

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "OpenAI API error: Your prompt was rejected"


def test_connection_error_defaults_to_500():
    error = openai.APIConnectionError(request=REQUEST)
    service = _service(completions=_FakeCompletions(error=error))

    with pytest.raises(ProviderError) as exc_info:
        anyio.run(service.generate_chat_response, "gpt-4o", [ChatMessage(role="user", content="hi")])

    assert exc_info.value.status_code == 500
    assert exc_info.value.message.startswith("OpenAI API error: ")


def test_missing_api_key_raises_on_first_use(monkeypatch):
    from mssgpt.core.settings import Settings

    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    service = OpenAIService(settings=Settings(_env_file=None))

    with pytest.raises(RuntimeError, match="OPENAI_API_KEY"):
        _ = service.client
