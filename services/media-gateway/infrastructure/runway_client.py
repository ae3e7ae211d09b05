"""Runway implementation of the VideoJobService interface."""

from typing import Any
from urllib.parse import quote

import httpx
from media_gateway_common.logging import setup_logging

from domain.models import UpstreamResponse
from exceptions import InternalError, UpstreamError

from .interfaces import VideoJobService
from .retry import transport_retrying

logger = setup_logging()

RUNWAY_VERSION_HEADER = "X-Runway-Version"


def build_runway_http_client(
    base_url: str,
    api_key: str,
    api_version: str,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Creates an HTTP client carrying the Runway credentials and pinned version."""
    return httpx.AsyncClient(
        base_url=base_url,
        headers={
            "Authorization": f"Bearer {api_key}",
            RUNWAY_VERSION_HEADER: api_version,
        },
        timeout=timeout,
        transport=transport,
    )


class RunwayClient(VideoJobService):
    """Submits and polls Runway text-to-video tasks."""

    def __init__(self, http_client: httpx.AsyncClient, max_retries: int = 3):
        self._http = http_client
        self._max_retries = max_retries

    async def submit(self, payload: dict[str, Any]) -> UpstreamResponse:
        try:
            response = await self._http.post("/text_to_video", json=payload)
        except httpx.HTTPError as e:
            logger.exception("Runway submit request failed")
            raise UpstreamError(502, str(e), service="runway") from e

        result = self._decode(response)
        logger.info(
            "Runway task submitted",
            extra={
                "status_code": result.status_code,
                "model": payload.get("model"),
            },
        )
        return result

    async def get_status(self, job_id: str) -> UpstreamResponse:
        path = f"/tasks/{quote(job_id, safe='')}"
        try:
            async for attempt in transport_retrying(self._max_retries):
                with attempt:
                    response = await self._http.get(path)
        except httpx.HTTPError as e:
            logger.exception("Runway status request failed", extra={"job_id": job_id})
            raise UpstreamError(502, str(e), service="runway") from e

        result = self._decode(response)
        logger.info(
            "Runway task polled",
            extra={"job_id": job_id, "status_code": result.status_code},
        )
        return result

    def _decode(self, response: httpx.Response) -> UpstreamResponse:
        """Decodes the JSON body while keeping the upstream status untouched."""
        try:
            body = response.json()
        except ValueError as e:
            logger.exception(
                "Runway returned a non-JSON body",
                extra={"status_code": response.status_code},
            )
            raise InternalError(f"Malformed upstream response: {e}") from e
        return UpstreamResponse(status_code=response.status_code, body=body)
