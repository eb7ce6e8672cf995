"""Asynchronous HTTP transport using httpx."""

import logging
from typing import Optional

import httpx

from ..config import get_settings
from ..core.errors import FetchFailed, NetworkError
from ..core.outcome import Failure, Outcome, Success
from .base import AsyncTransport, TransportError

logger = logging.getLogger(__name__)

# Global async client
_client: Optional[httpx.AsyncClient] = None


def _get_client() -> httpx.AsyncClient:
    """Get or create the global httpx AsyncClient."""
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient()
    return _client


class HttpxTransport:
    """Single-shot GET over an httpx client; status codes are not interpreted."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: Optional[float] = None):
        self._client = client
        self.timeout = timeout

    async def _send(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        if self.timeout is None:
            return await client.get(url)
        return await client.get(url, timeout=self.timeout)

    async def get(self, url: str) -> bytes:
        try:
            client = self._client if self._client is not None else _get_client()
            response = await self._send(client, url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"GET request failed: {e}") from e

        if response.status_code >= 400:
            # body is still handed to the caller
            logger.warning("GET %s returned status %d; treating body as payload", url, response.status_code)
        data = response.content
        logger.debug("GET %s -> %d bytes", url, len(data))
        return data

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        # Client is shared, don't close it here
        pass


def default_transport() -> HttpxTransport:
    return HttpxTransport(timeout=get_settings().timeout)


async def fetch(url: str, *, transport: Optional[AsyncTransport] = None) -> Outcome[bytes, NetworkError]:
    """Issue exactly one GET for `url` and return its body or the transport failure."""
    if transport is None:
        transport = default_transport()
    try:
        return Success(await transport.get(url))
    except TransportError as e:
        logger.debug("GET %s failed: %s", url, e)
        return Failure(FetchFailed(e.__cause__ or e))


async def close_global_client():
    """Close the global httpx client. Call this at application shutdown."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
