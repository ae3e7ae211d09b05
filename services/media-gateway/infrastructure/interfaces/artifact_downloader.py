"""Abstract interface for fetching remote artifacts."""

from abc import ABC, abstractmethod


class ArtifactDownloader(ABC):
    """Abstract base class for artifact download backends."""

    @abstractmethod
    async def fetch(self, url: str) -> bytes:
        """
        Downloads the full artifact body into memory.

        Raises:
            DownloadFailedError: If the download does not succeed.
        """
        pass
