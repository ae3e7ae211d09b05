"""End-to-end tests of the HTTP surface with fake adapters."""

import os

import httpx
from conftest import FakeChatService
from fastapi.testclient import TestClient
from media_gateway_common import DownloadFailedError, StorageUploadError

from application import create_app
from domain import UpstreamResponse
from exceptions import UpstreamError
from infrastructure import HttpArtifactDownloader


class TestHealth:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Server ok"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"ok": True}


class TestTranscribe:
    def test_missing_audio(self, client):
        response = client.post("/transcribe", data={"other": "field"})
        assert response.status_code == 400
        assert response.json() == {"error": "No audio file provided"}

    def test_no_body(self, client):
        response = client.post("/transcribe")
        assert response.status_code == 400
        assert response.json() == {"error": "No audio file provided"}

    def test_transcribes_upload(self, client, transcription_service, app_config):
        response = client.post(
            "/transcribe", files={"audio": ("nota.m4a", b"audio-bytes", "audio/mp4")}
        )

        assert response.status_code == 200
        assert response.json() == {"text": "hola mundo"}
        (path, language), = transcription_service.calls
        assert language == "es"
        assert path.endswith("-nota.m4a")
        assert os.listdir(app_config.transcription.tmp_dir) == []

    def test_upstream_error_status_and_message(
        self, client, transcription_service, app_config
    ):
        transcription_service.error = UpstreamError(
            400, "Invalid file format.", service="openai"
        )

        response = client.post(
            "/transcribe", files={"audio": ("nota.txt", b"not audio", "text/plain")}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid file format."}
        assert os.listdir(app_config.transcription.tmp_dir) == []

    def test_long_filename(self, client, transcription_service, app_config):
        response = client.post(
            "/transcribe", files={"audio": ("a" * 250 + ".wav", b"audio", "audio/wav")}
        )

        assert response.status_code == 200
        assert response.json() == {"text": "hola mundo"}
        (path, _), = transcription_service.calls
        assert path.endswith(".wav")
        assert len(os.path.basename(path)) < 255
        assert os.listdir(app_config.transcription.tmp_dir) == []

    def test_filename_with_nul(self, client, transcription_service, app_config):
        response = client.post(
            "/transcribe", files={"audio": ("nota\x00.wav", b"audio", "audio/wav")}
        )

        assert response.status_code == 200
        (path, _), = transcription_service.calls
        assert "\x00" not in path
        assert os.listdir(app_config.transcription.tmp_dir) == []

    def test_oversized_upload(self, client, transcription_service):
        response = client.post(
            "/transcribe", files={"audio": ("big.wav", b"\x00" * 2048, "audio/wav")}
        )

        assert response.status_code == 413
        assert "error" in response.json()
        assert transcription_service.calls == []


class TestGenerate:
    def test_missing_prompt(self, client, video_jobs):
        response = client.post("/runway/generate", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing prompt"}
        assert video_jobs.submitted == []

    def test_missing_body(self, client):
        response = client.post("/runway/generate")
        assert response.status_code == 400
        assert response.json() == {"error": "Missing prompt"}

    def test_defaults_and_no_seed(self, client, video_jobs):
        response = client.post("/runway/generate", json={"prompt": "a cat surfing"})

        assert response.status_code == 200
        assert response.json() == {"id": "task-123"}
        assert video_jobs.submitted == [
            {"model": "veo3", "promptText": "a cat surfing", "ratio": "16:9", "duration": 5}
        ]

    def test_explicit_null_seed_is_omitted(self, client, video_jobs):
        client.post("/runway/generate", json={"prompt": "a cat", "seed": None})
        assert "seed" not in video_jobs.submitted[0]

    def test_seed_is_forwarded(self, client, video_jobs):
        client.post(
            "/runway/generate",
            json={"prompt": "a cat", "ratio": "9:16", "duration": 10, "seed": 7},
        )
        assert video_jobs.submitted[0]["seed"] == 7
        assert video_jobs.submitted[0]["ratio"] == "9:16"
        assert video_jobs.submitted[0]["duration"] == 10

    def test_upstream_error_is_passed_through(self, client, video_jobs):
        video_jobs.response = UpstreamResponse(
            status_code=429, body={"error": "You have exceeded your quota"}
        )

        response = client.post("/runway/generate", json={"prompt": "a cat"})

        assert response.status_code == 429
        assert response.json() == {"error": "You have exceeded your quota"}

    def test_invalid_field_type(self, client, video_jobs):
        response = client.post(
            "/runway/generate", json={"prompt": "a cat", "duration": "long"}
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"
        assert video_jobs.submitted == []


class TestTasks:
    def test_status_is_passed_through(self, client, video_jobs):
        video_jobs.response = UpstreamResponse(
            status_code=200,
            body={"id": "t1", "status": "SUCCEEDED", "output": ["https://cdn/x.mp4"]},
        )

        response = client.get("/runway/tasks/t1")

        assert response.status_code == 200
        assert response.json()["output"] == ["https://cdn/x.mp4"]
        assert video_jobs.polled == ["t1"]

    def test_upstream_not_found(self, client, video_jobs):
        video_jobs.response = UpstreamResponse(status_code=404, body={"error": "Not found"})

        response = client.get("/runway/tasks/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}

    def test_repeated_polls_each_reach_upstream(self, client, video_jobs):
        client.get("/runway/tasks/t1")
        client.get("/runway/tasks/t1")
        assert video_jobs.polled == ["t1", "t1"]


class TestSaveArtifact:
    def test_saves_and_returns_location(self, client, store, downloader):
        response = client.post(
            "/runway/save-to-firebase",
            json={"url": "https://cdn/x.mp4", "meta": {"taskId": "t1", "seconds": 5, "hd": True}},
        )

        assert response.status_code == 200
        body = response.json()
        (saved,) = store.saved
        assert body == {
            "ok": True,
            "storagePath": saved["object_name"],
            "bucket": "test-bucket",
        }
        assert saved["metadata"] == {"taskId": "t1", "seconds": "5", "hd": "true"}
        assert saved["content_type"] == "video/mp4"
        assert downloader.urls == ["https://cdn/x.mp4"]

    def test_storage_alias(self, client, store):
        response = client.post("/runway/save-to-storage", json={"url": "https://cdn/x.mp4"})
        assert response.status_code == 200
        assert len(store.saved) == 1

    def test_missing_url(self, client, store):
        response = client.post("/runway/save-to-firebase", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing url"}
        assert store.saved == []

    def test_malformed_url(self, context, store):
        context.downloader = HttpArtifactDownloader(
            httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
        )
        client = TestClient(create_app(context))

        response = client.post(
            "/runway/save-to-firebase", json={"url": "https://cdn.test:notaport/x.mp4"}
        )

        assert response.status_code == 502
        assert response.json() == {"error": "Download failed"}
        assert store.saved == []

    def test_download_failure(self, client, downloader, store):
        downloader.error = DownloadFailedError("https://example/404.mp4", 404)

        response = client.post(
            "/runway/save-to-firebase", json={"url": "https://example/404.mp4"}
        )

        assert response.status_code == 502
        assert response.json() == {"error": "Download failed", "status": 404}
        assert store.saved == []

    def test_store_failure(self, client, store):
        store.error = StorageUploadError("runway/x.mp4", Exception("AccessDenied"))

        response = client.post("/runway/save-to-firebase", json={"url": "https://cdn/x.mp4"})

        assert response.status_code == 500
        assert response.json() == {"error": "AccessDenied"}


class TestChat:
    def test_not_configured(self, client):
        response = client.post("/chat", json={"model": "gpt-4o-mini", "messages": []})
        assert response.status_code == 503
        assert response.json() == {"error": "Chat completions is not configured"}

    def test_forwards_body(self, context):
        chat_service = FakeChatService()
        context.chat_service = chat_service
        client = TestClient(create_app(context))
        params = {"model": "gpt-4o-mini", "messages": [{"role": "user", "content": "hola"}]}

        response = client.post("/chat", json=params)

        assert response.status_code == 200
        assert response.json()["id"] == "chatcmpl-1"
        assert chat_service.requests == [params]


class TestUnexpectedErrors:
    def test_unexpected_error_becomes_json_500(self, context, transcription_service):
        transcription_service.error = RuntimeError("socket closed")
        client = TestClient(create_app(context), raise_server_exceptions=False)

        response = client.post(
            "/transcribe", files={"audio": ("a.wav", b"data", "audio/wav")}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "socket closed"}
