"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import Direction


class TimelineError(Exception):
    """Base exception for all library errors."""

    pass


class FetchError(TimelineError):
    """Fetching a page failed.

    Covers every failure of the underlying page source: network faults,
    non-success HTTP statuses and bodies that cannot be decoded. Never
    retried by the library.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class TransportError(FetchError):
    """Network failure or non-success HTTP status."""

    pass


class DecodeError(FetchError):
    """Response body is malformed or does not match the expected shape."""

    pass


class NavigationError(TimelineError):
    """Navigation requested past an end of the collection.

    Raised locally, before any network call, when the current page carries
    no cursor in the requested direction. Callers can treat it as normal
    termination rather than an operational fault.
    """

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        direction: Direction | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.direction = direction


class NoNextCursorError(NavigationError):
    """Current page has no next cursor; the collection is exhausted forwards."""

    pass


class NoPreviousCursorError(NavigationError):
    """Current page has no previous cursor."""

    pass
