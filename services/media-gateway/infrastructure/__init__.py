"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .http_downloader import HttpArtifactDownloader
from .minio_storage import MinioArtifactStore
from .openai_chat import OpenAIChatService
from .runway_client import RunwayClient, build_runway_http_client
from .whisper_transcriber import WhisperTranscriber

__all__ = [
    "AssemblyAITranscriber",
    "HttpArtifactDownloader",
    "MinioArtifactStore",
    "OpenAIChatService",
    "RunwayClient",
    "WhisperTranscriber",
    "build_runway_http_client",
]
