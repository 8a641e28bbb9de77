"""rbx-timeline - async traversal of cursor-paginated HTTP collections."""

from .connectors import RobloxUsersClient
from .core import (
    MAX_PAGE_SIZE,
    AsyncTimeline,
    CursorTimeline,
    DecodeError,
    Direction,
    FetchError,
    ItemIterator,
    NavigationError,
    NoNextCursorError,
    NoPreviousCursorError,
    PageSource,
    TimelineError,
    TransportError,
)
from .models import CursorPage, User, UserQuery
from .runtime import HTTPClient, HTTPPageSource

__version__ = "0.1.0"

__all__ = [
    # Navigation
    "AsyncTimeline",
    "CursorTimeline",
    "ItemIterator",
    "PageSource",
    "Direction",
    "MAX_PAGE_SIZE",
    # Models
    "CursorPage",
    "User",
    "UserQuery",
    # Runtime
    "HTTPClient",
    "HTTPPageSource",
    # Connectors
    "RobloxUsersClient",
    # Exceptions
    "TimelineError",
    "FetchError",
    "TransportError",
    "DecodeError",
    "NavigationError",
    "NoNextCursorError",
    "NoPreviousCursorError",
]
