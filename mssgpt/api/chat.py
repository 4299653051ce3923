import logging

from fastapi import APIRouter, Depends, Request

from mssgpt.core.errors import RelayError
from mssgpt.core.settings import Settings, get_settings
from mssgpt.dependencies import get_openai_service
from mssgpt.models.chat import ChatResponse, parse_chat_request
from mssgpt.services.openai_service import OpenAIService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat_endpoint(
    request: Request,
    openai_service: OpenAIService = Depends(get_openai_service),
    settings: Settings = Depends(get_settings),
) -> ChatResponse:
    """
    Relay one conversation turn to the provider.

    ``chat`` mode returns the completion text; ``image`` mode treats the last
    message as a prompt and returns the generated image URL.
    """
    try:
        try:
            payload = await request.json()
        except ValueError:
            payload = None

        chat_request = parse_chat_request(payload, default_model=settings.default_model)

        if chat_request.mode == "chat":
            content = await openai_service.generate_chat_response(
                model=chat_request.model,
                messages=chat_request.messages,
            )
            return ChatResponse(content=content)

        prompt = chat_request.messages[-1].content
        url = await openai_service.generate_image(prompt=prompt)
        return ChatResponse(content=url, type="image")

    except RelayError:
        raise
    except Exception as e:
        logger.exception("Chat endpoint failed")
        raise RelayError("Failed to process request", status_code=500) from e
