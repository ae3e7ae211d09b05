"""Request orchestration handlers."""

from .transcription_pipeline import TranscriptionPipeline
from .video_job_orchestrator import VideoJobOrchestrator

__all__ = ["TranscriptionPipeline", "VideoJobOrchestrator"]
