"""Transport layer for termsearch - one GET per call, failures as outcomes."""

# Re-export these for import convenience
from .base import Transport, AsyncTransport, TransportError
from .http_sync import RequestsTransport, fetch_sync, close_session
from .http_async import HttpxTransport, fetch, close_global_client

__all__ = [
    "Transport", "AsyncTransport", "TransportError",
    "RequestsTransport", "fetch_sync", "close_session",
    "HttpxTransport", "fetch", "close_global_client",
]
