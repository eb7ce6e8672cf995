"""Base protocols and shared types for the transport layer."""

from typing import Protocol, runtime_checkable


class TransportError(IOError):
    """Raised by transports when no response could be obtained."""


@runtime_checkable
class Transport(Protocol):
    """Protocol for synchronous transports."""

    def get(self, url: str) -> bytes:
        """Issue one GET for `url` and return the response body.
        Transport-level failures → raise TransportError.
        """
        ...


@runtime_checkable
class AsyncTransport(Protocol):
    """Protocol for asynchronous transports."""

    async def get(self, url: str) -> bytes:
        """Issue one GET for `url` and return the response body.
        Transport-level failures → raise TransportError.
        """
        ...
