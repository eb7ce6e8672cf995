"""Continuation-style entry points backed by a shared worker pool.

Each call returns a ``concurrent.futures.Future`` that resolves to the outcome.
An optional callback receives the same outcome exactly once, on the worker
thread that produced it, before the future resolves.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from .config import get_settings
from .core.document import Document
from .core.errors import NetworkError, SearchError
from .core.outcome import Outcome
from .io.base import Transport
from .io.http_sync import fetch_sync
from .search import search_sync

logger = logging.getLogger(__name__)

Callback = Callable[[Outcome[Any, Any]], None]

_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


def _get_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(
                max_workers=get_settings().max_workers,
                thread_name_prefix="termsearch",
            )
        return _executor


def shutdown_dispatcher(wait: bool = True):
    """Shut the worker pool down; the next submit creates a fresh one."""
    global _executor
    with _executor_lock:
        if _executor is not None:
            _executor.shutdown(wait=wait)
            _executor = None


def _run(job: Callable[[], Outcome], callback: Optional[Callback]) -> Outcome:
    outcome = job()
    if callback is not None:
        callback(outcome)
    return outcome


def submit_fetch(
    url: str,
    callback: Optional[Callback] = None,
    *,
    transport: Optional[Transport] = None,
) -> "Future[Outcome[bytes, NetworkError]]":
    """Fetch `url` on the worker pool."""
    logger.debug("submitting fetch for %s", url)
    return _get_executor().submit(_run, lambda: fetch_sync(url, transport=transport), callback)


def submit_search(
    term: str,
    callback: Optional[Callback] = None,
    *,
    endpoint: Optional[str] = None,
    transport: Optional[Transport] = None,
) -> "Future[Outcome[Document, SearchError]]":
    """Search for `term` on the worker pool."""
    logger.debug("submitting search for %r", term)
    return _get_executor().submit(
        _run, lambda: search_sync(term, endpoint=endpoint, transport=transport), callback
    )
