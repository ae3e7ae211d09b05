"""Domain layer exports."""

from .artifacts import ARTIFACT_CONTENT_TYPE, build_artifact_key, stringify_metadata
from .models import (
    AudioUpload,
    SaveRequest,
    TranscriptionResult,
    UpstreamResponse,
    VideoGenerationRequest,
)
from .transcripts import normalize_transcript

__all__ = [
    "ARTIFACT_CONTENT_TYPE",
    "AudioUpload",
    "SaveRequest",
    "TranscriptionResult",
    "UpstreamResponse",
    "VideoGenerationRequest",
    "build_artifact_key",
    "normalize_transcript",
    "stringify_metadata",
]
