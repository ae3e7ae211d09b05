import os
from typing import Any

import pytest
from fastapi.testclient import TestClient
from media_gateway_common import MinioConfig, StorageObjectRef
from media_gateway_common.infrastructure import ArtifactStore

from application import create_app
from config import AppConfig, RunwayConfig, TranscriptionConfig
from dependencies import ServiceContext
from domain import UpstreamResponse
from infrastructure.interfaces import (
    ArtifactDownloader,
    ChatService,
    TranscriptionService,
    VideoJobService,
)


class FakeTranscriptionService(TranscriptionService):
    def __init__(self, payload: Any = None, error: Exception | None = None):
        self.payload = {"text": "hola mundo"} if payload is None else payload
        self.error = error
        self.calls: list[tuple[str, str]] = []
        self.file_existed: list[bool] = []
        self.file_contents: list[bytes] = []

    async def transcribe(self, audio_path: str, language: str) -> dict[str, Any]:
        self.calls.append((audio_path, language))
        self.file_existed.append(os.path.exists(audio_path))
        with open(audio_path, "rb") as f:
            self.file_contents.append(f.read())
        if self.error is not None:
            raise self.error
        return self.payload


class FakeVideoJobService(VideoJobService):
    def __init__(self, response: UpstreamResponse | None = None):
        self.response = response or UpstreamResponse(
            status_code=200, body={"id": "task-123"}
        )
        self.submitted: list[dict[str, Any]] = []
        self.polled: list[str] = []

    async def submit(self, payload: dict[str, Any]) -> UpstreamResponse:
        self.submitted.append(payload)
        return self.response

    async def get_status(self, job_id: str) -> UpstreamResponse:
        self.polled.append(job_id)
        return self.response


class FakeDownloader(ArtifactDownloader):
    def __init__(self, data: bytes = b"mp4-bytes", error: Exception | None = None):
        self.data = data
        self.error = error
        self.urls: list[str] = []

    async def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.data


class FakeArtifactStore(ArtifactStore):
    def __init__(self, bucket_name: str = "test-bucket", error: Exception | None = None):
        self._bucket_name = bucket_name
        self.error = error
        self.saved: list[dict[str, Any]] = []

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    async def save(self, object_name, data, content_type, metadata) -> StorageObjectRef:
        if self.error is not None:
            raise self.error
        self.saved.append(
            {
                "object_name": object_name,
                "data": data,
                "content_type": content_type,
                "metadata": metadata,
            }
        )
        return StorageObjectRef(key=object_name, bucket=self._bucket_name)

    def ensure_bucket_exists(self) -> None:
        pass


class FakeChatService(ChatService):
    def __init__(self):
        self.requests: list[dict[str, Any]] = []

    async def complete(self, params: dict[str, Any]) -> dict[str, Any]:
        self.requests.append(params)
        return {"id": "chatcmpl-1", "choices": [{"message": {"content": "hi"}}]}


@pytest.fixture
def app_config(tmp_path) -> AppConfig:
    return AppConfig(
        minio=MinioConfig(endpoint="localhost:9000", user="u", password="p"),
        runway=RunwayConfig(api_key="rw-key"),
        transcription=TranscriptionConfig(
            tmp_dir=str(tmp_path / "tmp_audio"), max_upload_bytes=1024
        ),
    )


@pytest.fixture
def transcription_service() -> FakeTranscriptionService:
    return FakeTranscriptionService()


@pytest.fixture
def video_jobs() -> FakeVideoJobService:
    return FakeVideoJobService()


@pytest.fixture
def downloader() -> FakeDownloader:
    return FakeDownloader()


@pytest.fixture
def store() -> FakeArtifactStore:
    return FakeArtifactStore()


@pytest.fixture
def context(app_config, transcription_service, video_jobs, downloader, store):
    return ServiceContext(
        config=app_config,
        transcription_service=transcription_service,
        video_jobs=video_jobs,
        downloader=downloader,
        store=store,
    )


@pytest.fixture
def client(context) -> TestClient:
    return TestClient(create_app(context))
