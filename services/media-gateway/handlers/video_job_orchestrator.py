"""Handler for the submit, poll and materialize video-job operations."""

from media_gateway_common import StorageObjectRef, setup_logging
from media_gateway_common.infrastructure import ArtifactStore

from domain import (
    ARTIFACT_CONTENT_TYPE,
    SaveRequest,
    UpstreamResponse,
    VideoGenerationRequest,
    build_artifact_key,
    stringify_metadata,
)
from exceptions import ValidationError
from infrastructure.interfaces import ArtifactDownloader, VideoJobService

logger = setup_logging()


class VideoJobOrchestrator:
    """
    Exposes the three independent steps of a video-generation job.

    No job state is kept between calls: the client drives polling and
    decides when a finished artifact is materialized.
    """

    def __init__(
        self,
        video_jobs: VideoJobService,
        downloader: ArtifactDownloader,
        store: ArtifactStore,
    ):
        self._video_jobs = video_jobs
        self._downloader = downloader
        self._store = store

    async def submit(self, request: VideoGenerationRequest) -> UpstreamResponse:
        """
        Submits a text-to-video job and returns the upstream reply unchanged.

        Raises:
            ValidationError: If the prompt is missing or empty.
        """
        if not request.prompt:
            raise ValidationError("Missing prompt")

        logger.info(
            "Submitting video job",
            extra={
                "model": request.model,
                "ratio": request.ratio,
                "duration": request.duration,
                "has_seed": request.seed is not None,
            },
        )
        return await self._video_jobs.submit(request.to_upstream_payload())

    async def poll(self, job_id: str) -> UpstreamResponse:
        """Fetches a job's current upstream status; nothing is cached."""
        if not job_id:
            raise ValidationError("Missing task id")
        return await self._video_jobs.get_status(job_id)

    async def materialize(self, request: SaveRequest) -> StorageObjectRef:
        """
        Downloads a finished artifact and persists it in durable storage.

        Returns:
            Reference to the stored object.

        Raises:
            ValidationError: If the source URL is missing.
            DownloadFailedError: If the artifact cannot be downloaded.
            StorageUploadError: If the store rejects the write.
        """
        if not request.url:
            raise ValidationError("Missing url")

        data = await self._downloader.fetch(request.url)

        object_name = build_artifact_key()
        ref = await self._store.save(
            object_name=object_name,
            data=data,
            content_type=ARTIFACT_CONTENT_TYPE,
            metadata=stringify_metadata(request.meta),
        )

        logger.info(
            "Artifact materialized",
            extra={"object_name": ref.key, "bucket": ref.bucket, "size": len(data)},
        )
        return ref
