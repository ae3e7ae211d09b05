"""MinIO implementation of the ArtifactStore interface."""

import asyncio
import io
from urllib.parse import quote

from media_gateway_common import StorageObjectRef, StorageUploadError, setup_logging
from media_gateway_common.infrastructure import ArtifactStore
from minio import Minio
from minio.helpers import MIN_PART_SIZE

logger = setup_logging()


def _header_safe(text: str) -> str:
    if text.isascii() and text.isprintable():
        return text
    return quote(text, safe="")


def encode_metadata(metadata: dict[str, str]) -> dict[str, str]:
    """
    Makes metadata safe for S3 user-metadata headers, which only carry US-ASCII.

    Printable ASCII keys and values are kept as-is. Any key or value with
    non-ASCII or control characters is stored as percent-encoded UTF-8, so
    ``canción`` becomes ``canci%C3%B3n`` and ``urllib.parse.unquote``
    restores it.
    """
    return {_header_safe(key): _header_safe(value) for key, value in metadata.items()}


class MinioArtifactStore(ArtifactStore):
    """Handles artifact storage operations using MinIO."""

    def __init__(self, client: Minio, bucket_name: str):
        self._client = client
        self._bucket_name = bucket_name

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    async def save(
        self,
        object_name: str,
        data: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> StorageObjectRef:
        await asyncio.to_thread(self._put, object_name, data, content_type, metadata)
        return StorageObjectRef(key=object_name, bucket=self._bucket_name)

    def _put(
        self,
        object_name: str,
        data: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> None:
        size = len(data)
        try:
            self._client.put_object(
                bucket_name=self._bucket_name,
                object_name=object_name,
                data=io.BytesIO(data),
                length=size,
                content_type=content_type,
                metadata=encode_metadata(metadata),
                # One part covering the whole payload keeps this a single PUT.
                part_size=max(MIN_PART_SIZE, size),
            )
            logger.info(
                "File uploaded to MinIO",
                extra={
                    "bucket_name": self._bucket_name,
                    "object_name": object_name,
                    "size": size,
                },
            )
        except Exception as e:
            logger.exception(
                "MinIO upload failed",
                extra={"bucket_name": self._bucket_name, "object_name": object_name},
            )
            raise StorageUploadError(object_name, e) from e

    def ensure_bucket_exists(self) -> None:
        if not self._client.bucket_exists(self._bucket_name):
            self._client.make_bucket(self._bucket_name)
            logger.info("Bucket created", extra={"bucket_name": self._bucket_name})
        else:
            logger.info(
                "Bucket already exists", extra={"bucket_name": self._bucket_name}
            )
