"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod
from typing import Any


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    async def transcribe(self, audio_path: str, language: str) -> dict[str, Any]:
        """
        Transcribes an audio file and returns the structured response.

        Args:
            audio_path: Path of the audio file on local disk.
            language: Language code of the spoken audio.

        Returns:
            The provider's JSON response payload.

        Raises:
            UpstreamError: If the provider rejects the request.
        """
        pass
