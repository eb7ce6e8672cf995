"""termsearch - a typed fetch-and-decode pipeline for a term search endpoint."""

from .core.outcome import Success, Failure, Outcome, outcome_from          # re-export
from .core.errors import (                                                  # re-export
    FetchFailed, NetworkError,
    InvalidTerm, Underlying, InvalidDecode, SearchError,
    OutcomeError, ConfigError,
)
from .core.document import Document, JSONValue, decode_document
from .io import fetch, fetch_sync, TransportError
from .search import search, search_sync, encode_term, build_url
from .dispatch import submit_fetch, submit_search, shutdown_dispatcher


__all__ = [
    "fetch", "fetch_sync", "search", "search_sync",
    "submit_fetch", "submit_search", "shutdown_dispatcher",
    "encode_term", "build_url", "decode_document",
    "Success", "Failure", "Outcome", "outcome_from",
    "FetchFailed", "NetworkError", "InvalidTerm", "Underlying", "InvalidDecode", "SearchError",
    "OutcomeError", "ConfigError", "TransportError",
    "Document", "JSONValue",
]
