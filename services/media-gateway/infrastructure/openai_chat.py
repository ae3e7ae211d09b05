"""OpenAI implementation of the ChatService interface."""

from typing import Any

import openai
from media_gateway_common.logging import setup_logging

from exceptions import UpstreamError

from .interfaces import ChatService

logger = setup_logging()


class OpenAIChatService(ChatService):
    """Forwards chat-completion requests to OpenAI."""

    def __init__(self, client: openai.AsyncOpenAI):
        self._client = client

    async def complete(self, params: dict[str, Any]) -> dict[str, Any]:
        try:
            completion = await self._client.chat.completions.create(**params)
        except openai.APIStatusError as e:
            logger.exception("OpenAI chat completion failed")
            raise UpstreamError(e.status_code, e.message, service="openai") from e
        except openai.APIConnectionError as e:
            logger.exception("OpenAI chat request failed")
            raise UpstreamError(502, str(e), service="openai") from e

        logger.info("Chat completion created", extra={"model": params.get("model")})
        return completion.model_dump()
