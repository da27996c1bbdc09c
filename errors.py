"""
Errors raised by the watcher. Callers tell them apart by type; none are retried internally.
"""


class NeoWatchError(Exception):
    """Base class for all watcher errors."""


class FetchWindowError(NeoWatchError, ValueError):
    """Requested window spans more than MAX_WINDOW_DAYS. Raised before any request is made."""

    def __init__(self, offset: int) -> None:
        super().__init__(f"cannot fetch infos for more than 7 days in one request (offset={offset})")
        self.offset = offset


class RateLimitError(NeoWatchError):
    """Upstream quota exhausted. Retry on a later poll or use a proper key instead of the default one."""


class UpstreamError(NeoWatchError):
    """Feed request failed for any reason other than rate limiting."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class StoreError(NeoWatchError, OSError):
    """Observed set could not be read or written."""


class DateParseError(NeoWatchError, ValueError):
    """A close approach date did not match YYYY-MM-DD. Aborts the current fetch."""

    def __init__(self, value: str) -> None:
        super().__init__(f"malformed close approach date: {value!r}")
        self.value = value
