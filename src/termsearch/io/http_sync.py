"""Synchronous HTTP transport using requests."""

import logging
import threading
from typing import Optional

import requests

from ..config import get_settings
from ..core.errors import FetchFailed, NetworkError
from ..core.outcome import Failure, Outcome, Success
from .base import Transport, TransportError

logger = logging.getLogger(__name__)

# Module-level session for connection pooling
_session: Optional[requests.Session] = None
_session_lock = threading.Lock()


def _get_session() -> requests.Session:
    """Get or create the global requests session."""
    global _session
    with _session_lock:
        if _session is None:
            _session = requests.Session()
        return _session


def close_session():
    """Close the global requests session. Call this at application shutdown."""
    global _session
    with _session_lock:
        if _session is not None:
            _session.close()
            _session = None


class RequestsTransport:
    """Single-shot GET over a requests session; status codes are not interpreted."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self._session = session if session is not None else _get_session()
        self.timeout = timeout

    def get(self, url: str) -> bytes:
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"GET request failed: {e}") from e

        if response.status_code >= 400:
            # body is still handed to the caller
            logger.warning("GET %s returned status %d; treating body as payload", url, response.status_code)
        data = response.content
        logger.debug("GET %s -> %d bytes", url, len(data))
        return data

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Session is shared, don't close it here
        pass


def default_transport() -> RequestsTransport:
    return RequestsTransport(timeout=get_settings().timeout)


def fetch_sync(url: str, *, transport: Optional[Transport] = None) -> Outcome[bytes, NetworkError]:
    """Issue exactly one GET for `url` and return its body or the transport failure."""
    if transport is None:
        transport = default_transport()
    try:
        return Success(transport.get(url))
    except TransportError as e:
        logger.debug("GET %s failed: %s", url, e)
        return Failure(FetchFailed(e.__cause__ or e))
