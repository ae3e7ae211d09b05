"""HTTP implementation of the ArtifactDownloader interface."""

import httpx
from media_gateway_common import DownloadFailedError
from media_gateway_common.logging import setup_logging

from .interfaces import ArtifactDownloader
from .retry import transport_retrying

logger = setup_logging()


class HttpArtifactDownloader(ArtifactDownloader):
    """Downloads artifacts from temporary upstream URLs."""

    def __init__(self, http_client: httpx.AsyncClient, max_retries: int = 3):
        self._http = http_client
        self._max_retries = max_retries

    async def fetch(self, url: str) -> bytes:
        # The whole artifact is buffered in memory before it is stored.
        try:
            async for attempt in transport_retrying(self._max_retries):
                with attempt:
                    response = await self._http.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.exception("Artifact download request failed", extra={"url": url})
            raise DownloadFailedError(url) from e

        if not response.is_success:
            logger.error(
                "Artifact download failed",
                extra={"url": url, "status_code": response.status_code},
            )
            raise DownloadFailedError(url, response.status_code)

        logger.info(
            "Artifact downloaded",
            extra={"url": url, "size": len(response.content)},
        )
        return response.content
