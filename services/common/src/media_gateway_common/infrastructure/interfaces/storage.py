"""Abstract interface for durable artifact storage."""

from abc import ABC, abstractmethod

from media_gateway_common.models import StorageObjectRef


class ArtifactStore(ABC):
    """Abstract base class for durable object storage backends."""

    @property
    @abstractmethod
    def bucket_name(self) -> str:
        """Identity of the bucket objects are written to."""

    @abstractmethod
    async def save(
        self,
        object_name: str,
        data: bytes,
        content_type: str,
        metadata: dict[str, str],
    ) -> StorageObjectRef:
        """
        Persists a byte payload in a single, non-resumable write.

        Args:
            object_name: The destination key in storage.
            data: The full object payload.
            content_type: MIME type of the object.
            metadata: String-valued object metadata.

        Returns:
            Reference to the stored object.

        Raises:
            StorageUploadError: If the write fails.
        """
        pass

    @abstractmethod
    def ensure_bucket_exists(self) -> None:
        """Creates the target bucket if it does not exist yet."""
        pass
