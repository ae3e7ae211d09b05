"""Domain models for the media gateway."""

from typing import Any

from pydantic import BaseModel


class AudioUpload(BaseModel, frozen=True):
    """Raw audio bytes received from a client, with the original filename."""

    data: bytes
    filename: str | None = None


class TranscriptionResult(BaseModel, frozen=True):
    """Normalized text extracted from a transcription response."""

    text: str


class VideoGenerationRequest(BaseModel, frozen=True):
    """Parameters for a text-to-video generation job."""

    prompt: str | None = None
    ratio: str = "16:9"
    duration: int = 5
    model: str = "veo3"
    seed: int | None = None

    def to_upstream_payload(self) -> dict[str, Any]:
        """
        Maps the request onto the upstream text-to-video payload.

        The seed key is only present when a seed was given; the upstream
        rejects an explicit null.
        """
        payload: dict[str, Any] = {
            "model": self.model,
            "promptText": self.prompt,
            "ratio": self.ratio,
            "duration": self.duration,
        }
        if self.seed is not None:
            payload["seed"] = self.seed
        return payload


class SaveRequest(BaseModel, frozen=True):
    """Request to persist a finished artifact from a temporary URL."""

    url: str | None = None
    meta: dict[str, Any] | None = None


class UpstreamResponse(BaseModel, frozen=True):
    """Status code and decoded JSON body of an upstream response."""

    status_code: int
    body: Any = None
