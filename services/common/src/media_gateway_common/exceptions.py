"""Base error type and storage errors shared by gateway components."""

from typing import Any


class GatewayError(Exception):
    """
    Base exception for errors reported to gateway clients.

    Attributes:
        status_code: HTTP status code returned to the client.
        context: Extra key-value pairs merged into the JSON error body.
    """

    status_code: int = 500

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context


class StorageError(GatewayError):
    """Raised when fetching or persisting an artifact fails."""

    status_code = 500


class DownloadFailedError(StorageError):
    """Raised when the source artifact cannot be downloaded."""

    status_code = 502

    def __init__(self, url: str, status: int | None = None):
        self.url = url
        self.status = status
        context = {"status": status} if status is not None else {}
        super().__init__("Download failed", **context)


class StorageUploadError(StorageError):
    """Raised when writing an object to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        message = str(cause) if cause else f"Failed to upload '{object_name}'"
        super().__init__(message)
