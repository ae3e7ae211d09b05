"""Retry policy for idempotent outbound HTTP requests."""

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)


def transport_retrying(max_attempts: int) -> AsyncRetrying:
    """
    Retries transport failures with exponential backoff.

    Responses are never retried, nor are URLs whose scheme no transport
    supports, since another attempt cannot succeed.
    """
    return AsyncRetrying(
        retry=(
            retry_if_exception_type(httpx.TransportError)
            & retry_if_not_exception_type(httpx.UnsupportedProtocol)
        ),
        wait=wait_exponential(multiplier=0.5, max=8),
        stop=stop_after_attempt(max(1, max_attempts)),
        reraise=True,
    )
