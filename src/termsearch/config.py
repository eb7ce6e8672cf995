import os
from dataclasses import dataclass
from typing import Optional

from .core.errors import ConfigError


DEFAULT_ENDPOINT = "https://itunes.apple.com/search?term="
DEFAULT_MAX_WORKERS = 4
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True, slots=True)
class Settings:
    endpoint: str
    timeout: Optional[float]    # None = HTTP library default
    max_workers: int
    log_level: str


def _read_timeout() -> Optional[float]:
    raw = os.getenv("TERMSEARCH_TIMEOUT", "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"TERMSEARCH_TIMEOUT must be a number of seconds, got {raw!r}")
    if not timeout > 0:
        raise ConfigError(f"TERMSEARCH_TIMEOUT must be positive, got {raw!r}")
    return timeout


def _read_max_workers() -> int:
    raw = os.getenv("TERMSEARCH_MAX_WORKERS", "").strip()
    if not raw:
        return DEFAULT_MAX_WORKERS
    try:
        workers = int(raw)
    except ValueError:
        raise ConfigError(f"TERMSEARCH_MAX_WORKERS must be an integer, got {raw!r}")
    if workers < 1:
        raise ConfigError(f"TERMSEARCH_MAX_WORKERS must be at least 1, got {raw!r}")
    return workers


def get_settings() -> Settings:
    """
    Settings are read from environment variables on every call.
    - TERMSEARCH_ENDPOINT: search endpoint prefix the encoded term is appended to
    - TERMSEARCH_TIMEOUT: request timeout in seconds (unset = library default)
    - TERMSEARCH_MAX_WORKERS: size of the callback dispatcher pool
    - TERMSEARCH_LOG_LEVEL: default level for setup_logger
    """
    return Settings(
        endpoint=os.getenv("TERMSEARCH_ENDPOINT", "").strip() or DEFAULT_ENDPOINT,
        timeout=_read_timeout(),
        max_workers=_read_max_workers(),
        log_level=os.getenv("TERMSEARCH_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL,
    )
