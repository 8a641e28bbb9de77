"""Core components."""

from .constants import CURSOR_PARAM, LIMIT_PARAM, MAX_PAGE_SIZE, PAGING_PARAMS
from .enums import Direction
from .exceptions import (
    DecodeError,
    FetchError,
    NavigationError,
    NoNextCursorError,
    NoPreviousCursorError,
    TimelineError,
    TransportError,
)
from .iterator import ItemIterator
from .timeline import AsyncTimeline, CursorTimeline, PageSource

__all__ = [
    # Navigation
    "AsyncTimeline",
    "CursorTimeline",
    "ItemIterator",
    "PageSource",
    "Direction",
    # Constants
    "MAX_PAGE_SIZE",
    "LIMIT_PARAM",
    "CURSOR_PARAM",
    "PAGING_PARAMS",
    # Exceptions
    "TimelineError",
    "FetchError",
    "TransportError",
    "DecodeError",
    "NavigationError",
    "NoNextCursorError",
    "NoPreviousCursorError",
]
