"""Term search: encode → request → translate error → decode."""

import logging
from typing import Optional
from urllib.parse import quote

from .config import get_settings
from .core.document import Document, decode_document
from .core.errors import InvalidTerm, SearchError, Underlying
from .core.outcome import Failure, Outcome, Success
from .io.base import AsyncTransport, Transport
from .io.http_async import fetch
from .io.http_sync import fetch_sync

logger = logging.getLogger(__name__)


def encode_term(term: str) -> Outcome[str, InvalidTerm]:
    """Percent-encode `term` for use as a query value; every reserved character is escaped."""
    try:
        return Success(quote(term, safe="", encoding="utf-8", errors="strict"))
    except UnicodeEncodeError:
        # lone surrogates and the like have no UTF-8 form
        return Failure(InvalidTerm(term))


def build_url(term: str, endpoint: Optional[str] = None) -> Outcome[str, InvalidTerm]:
    if endpoint is None:
        endpoint = get_settings().endpoint
    return encode_term(term).map(lambda encoded: endpoint + encoded)


def _finish(term: str, outcome: Outcome[Document, SearchError]) -> Outcome[Document, SearchError]:
    if outcome.is_failure:
        logger.info("search for %r failed: %s", term, outcome.error)
    return outcome


def search_sync(
    term: str,
    *,
    endpoint: Optional[str] = None,
    transport: Optional[Transport] = None,
) -> Outcome[Document, SearchError]:
    """Search synchronously for `term` and decode the response into a Document."""
    url = build_url(term, endpoint)
    if url.is_failure:
        return _finish(term, url)

    outcome = (
        fetch_sync(url.value, transport=transport)
        .map_error(Underlying)
        .flat_map(decode_document)
    )
    return _finish(term, outcome)


async def search(
    term: str,
    *,
    endpoint: Optional[str] = None,
    transport: Optional[AsyncTransport] = None,
) -> Outcome[Document, SearchError]:
    """Search asynchronously for `term` and decode the response into a Document."""
    url = build_url(term, endpoint)
    if url.is_failure:
        return _finish(term, url)

    fetched = await fetch(url.value, transport=transport)
    outcome = fetched.map_error(Underlying).flat_map(decode_document)
    return _finish(term, outcome)
