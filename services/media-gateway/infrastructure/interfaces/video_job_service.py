"""Abstract interface for asynchronous video-generation jobs."""

from abc import ABC, abstractmethod
from typing import Any

from domain.models import UpstreamResponse


class VideoJobService(ABC):
    """Abstract base class for video-generation backends."""

    @abstractmethod
    async def submit(self, payload: dict[str, Any]) -> UpstreamResponse:
        """
        Submits a text-to-video job.

        Args:
            payload: The upstream job payload.

        Returns:
            The upstream status code and body, successful or not.

        Raises:
            UpstreamError: If the upstream cannot be reached.
            InternalError: If the upstream body is not valid JSON.
        """
        pass

    @abstractmethod
    async def get_status(self, job_id: str) -> UpstreamResponse:
        """
        Fetches the current status of a job.

        Args:
            job_id: The opaque job handle returned by submit.

        Returns:
            The upstream status code and body, successful or not.
        """
        pass
