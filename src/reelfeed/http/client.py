"""HTTP content fetcher.

Async client used by the pipeline to retrieve feeds, Reels and directory
index documents:
- Intermediary caching disabled on every request
- Byte-range requests for incremental feed reads
- Failures reported as None, never raised, from :meth:`HttpClient.fetch`

Example:
    >>> from reelfeed.http import HttpClient
    >>>
    >>> async with HttpClient(timeout=10.0) as client:
    ...     result = await client.fetch("https://example.com/feed.txt")
    ...     if result is not None:
    ...         print(result.media_type)
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from reelfeed.core.config import get_settings
from reelfeed.core.exceptions import FetchError
from reelfeed.models.fetch import FetchResult

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Pragma": "no-cache",
    "Cache-Control": "no-cache",
}


def range_header(starting_byte: int) -> dict[str, str]:
    """Headers requesting everything from ``starting_byte`` onward.

    Example:
        >>> range_header(24)
        {'Range': 'bytes=24-'}
        >>> range_header(0)
        {}
    """
    if starting_byte > 0:
        return {"Range": f"bytes={starting_byte}-"}
    return {}


class HttpClient:
    """Async HTTP client implementing the ContentFetcher protocol.

    Example:
        >>> async with HttpClient(base_url="https://example.com") as client:
        ...     result = await client.fetch("/feed.txt", starting_byte=24)

    Attributes:
        user_agent: User-Agent header value
        timeout: Default request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = "",
        user_agent: str | None = None,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize HTTP client.

        Args:
            base_url: Base URL for relative locations
            user_agent: User-Agent header (default from settings)
            timeout: Request timeout in seconds (default from settings)
            headers: Additional default headers
            transport: Custom httpx transport, mainly for tests
        """
        settings = get_settings()
        self._base_url = base_url
        self._user_agent = user_agent or settings.user_agent
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._extra_headers = headers or {}
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def user_agent(self) -> str:
        """User-Agent header value."""
        return self._user_agent

    @property
    def timeout(self) -> float:
        """Default request timeout in seconds."""
        return self._timeout

    @property
    def headers(self) -> dict[str, str]:
        """Default headers for requests."""
        return {
            "User-Agent": self._user_agent,
            "Accept": "*/*",
            **NO_CACHE_HEADERS,
            **self._extra_headers,
        }

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self.headers,
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpClient:
        """Async context manager entry."""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def get(self, location: str, starting_byte: int = 0) -> FetchResult:
        """Fetch ``location`` and raise on failure.

        A 416 answer to a range request means nothing was appended since
        ``starting_byte`` and is returned as an empty result.

        Raises:
            FetchError: On network errors or non-success statuses.
        """
        client = await self._ensure_client()

        try:
            response = await client.get(location, headers={**NO_CACHE_HEADERS, **range_header(starting_byte)})
        except httpx.HTTPError as e:
            raise FetchError(f"Request failed: {e}", location=location) from e

        if response.status_code == 416 and starting_byte > 0:
            return FetchResult(headers=dict(response.headers), text="", status_code=416)

        if not response.is_success:
            raise FetchError(f"HTTP {response.status_code}", location=location)

        return FetchResult(
            headers=dict(response.headers),
            text=response.text,
            status_code=response.status_code,
            content=response.content,
        )

    async def fetch(self, location: str, starting_byte: int = 0) -> FetchResult | None:
        """Fetch ``location``; None on any transport failure."""
        try:
            return await self.get(location, starting_byte)
        except FetchError as e:
            logger.error(f"Fetch failed: {location} ({e})")
            return None


@asynccontextmanager
async def http_client(
    base_url: str = "",
    **kwargs: Any,
) -> AsyncIterator[HttpClient]:
    """Context manager for HTTP client.

    Example:
        >>> async with http_client(timeout=10.0) as client:
        ...     result = await client.fetch("https://example.com/feed.txt")
    """
    client = HttpClient(base_url=base_url, **kwargs)
    try:
        async with client:
            yield client
    finally:
        await client.close()


__all__ = [
    "HttpClient",
    "http_client",
    "range_header",
]
