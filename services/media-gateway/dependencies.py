"""Dependency injection configuration for the media-gateway service."""

from dataclasses import dataclass, field
from typing import Annotated

import assemblyai as aai
import httpx
import openai
from fastapi import Depends, Request
from media_gateway_common import setup_logging
from media_gateway_common.infrastructure import ArtifactStore
from media_gateway_common.minio import get_minio_client

from config import AppConfig
from exceptions import ConfigurationError, ServiceNotConfiguredError
from handlers import TranscriptionPipeline, VideoJobOrchestrator
from infrastructure import (
    AssemblyAITranscriber,
    HttpArtifactDownloader,
    MinioArtifactStore,
    OpenAIChatService,
    RunwayClient,
    WhisperTranscriber,
    build_runway_http_client,
)
from infrastructure.interfaces import (
    ArtifactDownloader,
    ChatService,
    TranscriptionService,
    VideoJobService,
)

logger = setup_logging()


@dataclass
class ServiceContext:
    """Adapters shared by every request, constructed once at startup."""

    config: AppConfig
    transcription_service: TranscriptionService
    video_jobs: VideoJobService
    downloader: ArtifactDownloader
    store: ArtifactStore
    chat_service: ChatService | None = None
    http_clients: list[httpx.AsyncClient] = field(default_factory=list)

    async def aclose(self) -> None:
        """Closes the outbound HTTP connection pools."""
        for client in self.http_clients:
            await client.aclose()


def _build_transcription_service(
    config: AppConfig, openai_client: openai.AsyncOpenAI | None
) -> TranscriptionService:
    if config.transcription.provider == "assemblyai":
        if not config.transcription.assemblyai_api_key:
            raise ConfigurationError("ASSEMBLYAI_API_KEY is not set")
        aai.settings.api_key = config.transcription.assemblyai_api_key
        return AssemblyAITranscriber(aai.Transcriber())

    if openai_client is None:
        raise ConfigurationError("OPENAI_API_KEY is not set")
    return WhisperTranscriber(openai_client, config.transcription.model)


def build_context(config: AppConfig) -> ServiceContext:
    """Constructs every adapter from configuration."""
    openai_client = (
        openai.AsyncOpenAI(
            api_key=config.openai.api_key, timeout=config.http.timeout_seconds
        )
        if config.openai.api_key
        else None
    )
    transcription_service = _build_transcription_service(config, openai_client)

    store = MinioArtifactStore(get_minio_client(config.minio), config.minio.bucket_name)
    store.ensure_bucket_exists()

    runway_http = build_runway_http_client(
        base_url=config.runway.base_url,
        api_key=config.runway.api_key,
        api_version=config.runway.api_version,
        timeout=config.http.timeout_seconds,
    )
    download_http = httpx.AsyncClient(
        timeout=config.http.timeout_seconds, follow_redirects=True
    )

    logger.info(
        "Service context initialized",
        extra={
            "transcription_provider": config.transcription.provider,
            "bucket_name": config.minio.bucket_name,
            "runway_api_version": config.runway.api_version,
        },
    )

    return ServiceContext(
        config=config,
        transcription_service=transcription_service,
        video_jobs=RunwayClient(runway_http, config.http.max_retries),
        downloader=HttpArtifactDownloader(download_http, config.http.max_retries),
        store=store,
        chat_service=OpenAIChatService(openai_client) if openai_client else None,
        http_clients=[runway_http, download_http],
    )


def get_context(request: Request) -> ServiceContext:
    """Returns the service context attached to the running application."""
    return request.app.state.context


ContextDep = Annotated[ServiceContext, Depends(get_context)]


def get_transcription_pipeline(context: ContextDep) -> TranscriptionPipeline:
    """Returns a transcription pipeline bound to the configured provider."""
    settings = context.config.transcription
    return TranscriptionPipeline(
        context.transcription_service,
        language=settings.language,
        tmp_dir=settings.tmp_dir,
        max_upload_bytes=settings.max_upload_bytes,
    )


def get_video_job_orchestrator(context: ContextDep) -> VideoJobOrchestrator:
    """Returns the video-job orchestrator."""
    return VideoJobOrchestrator(context.video_jobs, context.downloader, context.store)


def get_chat_service(context: ContextDep) -> ChatService:
    """Returns the chat service, failing when no OpenAI key is configured."""
    if context.chat_service is None:
        raise ServiceNotConfiguredError("Chat completions")
    return context.chat_service
