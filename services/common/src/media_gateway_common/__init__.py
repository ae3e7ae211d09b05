from media_gateway_common.config import MinioConfig
from media_gateway_common.exceptions import (
    DownloadFailedError,
    GatewayError,
    StorageError,
    StorageUploadError,
)
from media_gateway_common.logging import setup_logging
from media_gateway_common.models import StorageObjectRef

__all__ = [
    "setup_logging",
    "GatewayError",
    "StorageError",
    "DownloadFailedError",
    "StorageUploadError",
    "MinioConfig",
    "StorageObjectRef",
]
