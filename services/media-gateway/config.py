"""Application configuration loaded from environment variables."""

import os
from typing import Literal

from media_gateway_common import MinioConfig
from pydantic import BaseModel

DEFAULT_MAX_AUDIO_BYTES = 60 * 1024 * 1024


class RunwayConfig(BaseModel, frozen=True):
    """Runway video-generation API configuration."""

    api_key: str
    base_url: str = "https://api.dev.runwayml.com/v1"
    # Pinned so upstream breaking changes do not reach clients unannounced.
    api_version: str = "2024-11-06"


class TranscriptionConfig(BaseModel, frozen=True):
    """Speech-to-text configuration."""

    provider: Literal["openai", "assemblyai"] = "openai"
    language: str = "es"
    model: str = "whisper-1"
    assemblyai_api_key: str = ""
    tmp_dir: str = "tmp_audio"
    max_upload_bytes: int = DEFAULT_MAX_AUDIO_BYTES


class OpenAIConfig(BaseModel, frozen=True):
    """OpenAI API configuration."""

    api_key: str = ""


class HttpConfig(BaseModel, frozen=True):
    """Outbound HTTP behaviour shared by all upstream calls."""

    timeout_seconds: float = 60.0
    max_retries: int = 3


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    minio: MinioConfig
    runway: RunwayConfig
    transcription: TranscriptionConfig = TranscriptionConfig()
    openai: OpenAIConfig = OpenAIConfig()
    http: HttpConfig = HttpConfig()
    port: int = 3001


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        minio=MinioConfig(
            endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            user=os.getenv("MINIO_USER", ""),
            password=os.getenv("MINIO_PASSWORD", ""),
            bucket_name=os.getenv("STORAGE_BUCKET", "artifacts"),
            secure=os.getenv("MINIO_SECURE", "false").lower() == "true",
        ),
        runway=RunwayConfig(
            api_key=os.getenv("RUNWAY_API_KEY", ""),
            base_url=os.getenv("RUNWAY_API_BASE_URL", "https://api.dev.runwayml.com/v1"),
            api_version=os.getenv("RUNWAY_API_VERSION", "2024-11-06"),
        ),
        transcription=TranscriptionConfig(
            provider=os.getenv("TRANSCRIPTION_PROVIDER", "openai"),
            language=os.getenv("TRANSCRIPTION_LANGUAGE", "es"),
            model=os.getenv("TRANSCRIPTION_MODEL", "whisper-1"),
            assemblyai_api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            tmp_dir=os.getenv("TMP_AUDIO_DIR", "tmp_audio"),
            max_upload_bytes=int(
                os.getenv("MAX_AUDIO_BYTES", str(DEFAULT_MAX_AUDIO_BYTES))
            ),
        ),
        openai=OpenAIConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
        ),
        http=HttpConfig(
            timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", "60")),
            max_retries=int(os.getenv("HTTP_MAX_RETRIES", "3")),
        ),
        port=int(os.getenv("PORT", "3001")),
    )
