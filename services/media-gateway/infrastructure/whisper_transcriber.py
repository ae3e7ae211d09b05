"""OpenAI Whisper implementation of the TranscriptionService interface."""

from pathlib import Path
from typing import Any

import openai
from media_gateway_common.logging import setup_logging

from exceptions import UpstreamError

from .interfaces import TranscriptionService

logger = setup_logging()


class WhisperTranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI transcription API."""

    def __init__(self, client: openai.AsyncOpenAI, model: str = "whisper-1"):
        self._client = client
        self._model = model

    async def transcribe(self, audio_path: str, language: str) -> dict[str, Any]:
        try:
            transcription = await self._client.audio.transcriptions.create(
                file=Path(audio_path),
                model=self._model,
                response_format="json",
                language=language,
            )
        except openai.APIStatusError as e:
            logger.exception(
                "OpenAI transcription failed",
                extra={"status_code": e.status_code, "response": e.body},
            )
            raise UpstreamError(e.status_code, e.message, service="openai") from e
        except openai.APIConnectionError as e:
            logger.exception("OpenAI transcription request failed")
            raise UpstreamError(502, str(e), service="openai") from e

        logger.info(
            "Audio transcription successful",
            extra={"model": self._model, "language": language},
        )
        return transcription.model_dump()
