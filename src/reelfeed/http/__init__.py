"""reelfeed HTTP utilities.

Example:
    >>> from reelfeed.http import HttpClient
    >>>
    >>> async with HttpClient() as client:
    ...     result = await client.fetch("https://example.com/feed.txt")
"""

from reelfeed.http.client import HttpClient, http_client

__all__ = [
    "HttpClient",
    "http_client",
]
