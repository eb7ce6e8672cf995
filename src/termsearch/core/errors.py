from __future__ import annotations
from dataclasses import dataclass, field


# --- network layer ---

@dataclass(frozen=True, slots=True)
class FetchFailed:
    """The transport reported an error before a response body was obtained."""
    cause: BaseException = field(compare=False)
    kind: str = field(init=False)
    message: str = field(init=False)

    def __post_init__(self):
        # equality follows the cause's type and text, not its identity
        object.__setattr__(self, "kind", type(self.cause).__name__)
        object.__setattr__(self, "message", str(self.cause))

    def __str__(self) -> str:
        return f"fetch failed: {self.kind}: {self.message}"


# single-variant taxonomy
NetworkError = FetchFailed


# --- search layer ---

@dataclass(frozen=True, slots=True)
class InvalidTerm:
    """The search term could not be percent-encoded; no request was made."""
    term: str

    def __str__(self) -> str:
        return f"invalid search term: {self.term!r}"


@dataclass(frozen=True, slots=True)
class Underlying:
    """A network failure surfaced through a search."""
    network_error: NetworkError

    def __str__(self) -> str:
        return str(self.network_error)


@dataclass(frozen=True, slots=True)
class InvalidDecode:
    """The response body is not a JSON object."""
    reason: str = field(default="", compare=False)

    def __str__(self) -> str:
        return f"invalid payload: {self.reason}" if self.reason else "invalid payload"


SearchError = InvalidTerm | Underlying | InvalidDecode


class OutcomeError(RuntimeError):
    """Raised when unwrapping a failed outcome."""

    def __init__(self, error):
        super().__init__(str(error))
        self.error = error


class ConfigError(ValueError):
    """Raised when an environment setting cannot be parsed."""
    pass
