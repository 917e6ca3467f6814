"""Shared HTTP client for catalogfetch."""

from contextlib import asynccontextmanager

import httpx

from catalogfetch.config.settings import DEFAULT_TIMEOUT

# Global HTTP client
_client: httpx.AsyncClient | None = None


def get_timeout_config(timeout: float = DEFAULT_TIMEOUT) -> httpx.Timeout:
    """Get the client-wide timeout.

    One value bounds connect, read, write and pool waits alike. Fetchers
    pass their own timeout on every request, so settings are not read here.
    """
    return httpx.Timeout(timeout)


@asynccontextmanager
async def get_http_client():
    """Get or create the shared HTTP client.

    Usage:
        async with get_http_client() as client:
            response = await client.get(...)
    """
    global _client

    if _client is None:
        limits = httpx.Limits(
            max_connections=10,
            max_keepalive_connections=5,
        )
        _client = httpx.AsyncClient(
            timeout=get_timeout_config(),
            limits=limits,
            follow_redirects=True,
        )

    try:
        yield _client
    finally:
        # Don't close - keep for reuse
        pass


async def cleanup() -> None:
    """Close the HTTP client.

    Should be called on application shutdown.
    """
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
