"""AssemblyAI implementation of the TranscriptionService interface."""

import asyncio
from typing import Any

import assemblyai as aai
from media_gateway_common.logging import setup_logging

from exceptions import UpstreamError

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    async def transcribe(self, audio_path: str, language: str) -> dict[str, Any]:
        """
        Transcribes an audio file using AssemblyAI.

        The SDK call blocks while it uploads and polls, so it runs in a
        worker thread. Returns the transcript's raw JSON response.
        """
        config = aai.TranscriptionConfig(language_code=language)
        try:
            transcript = await asyncio.to_thread(
                self._transcriber.transcribe, audio_path, config
            )
        except aai.types.TranscriptError as e:
            logger.exception("AssemblyAI transcription failed")
            status_code = getattr(e, "status_code", None) or 502
            raise UpstreamError(status_code, str(e), service="assemblyai") from e

        if transcript.status == aai.TranscriptStatus.error:
            logger.error(
                "AssemblyAI returned an error transcript",
                extra={"error": transcript.error},
            )
            raise UpstreamError(
                502, transcript.error or "Transcription failed", service="assemblyai"
            )

        logger.info(
            "Audio transcription successful",
            extra={"transcript_id": transcript.id, "language": language},
        )
        return transcript.json_response or {}
