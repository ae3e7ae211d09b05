"""Infrastructure interface exports."""

from media_gateway_common.infrastructure import ArtifactStore

from .artifact_downloader import ArtifactDownloader
from .chat_service import ChatService
from .transcription_service import TranscriptionService
from .video_job_service import VideoJobService

__all__ = [
    "ArtifactDownloader",
    "ArtifactStore",
    "ChatService",
    "TranscriptionService",
    "VideoJobService",
]
