"""Cursor timelines.

Architecture:
    A timeline wraps exactly one page and knows how to fetch its
    neighbours. Navigation never changes the timeline: ``forward()`` and
    ``backwards()`` return a new page, and continuing from that page takes
    a new timeline (``derive``). The page is owned by value, so a timeline
    can outlive whatever produced its page.

Design Decisions:
    - Abstract base class: alternative backing stores (test doubles, other
      pagination styles) plug in behind the same four operations
    - Missing cursors fail locally, before any fetch, with a navigation
      error that is distinguishable from a fetch error
    - Page sources are plain async callables ``source(endpoint, cursor)``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sized
from time import perf_counter
from typing import Any, Generic, TypeVar

from ..models.page import CursorPage
from .enums import Direction
from .exceptions import NoNextCursorError, NoPreviousCursorError
from .telemetry import log_page_fetch_failed, log_page_fetched, log_timeline_exhausted

T = TypeVar("T")

# ``await source(endpoint, cursor)``; a ``None`` cursor requests the first page.
PageSource = Callable[[str, "str | None"], Awaitable[CursorPage[Any]]]


class AsyncTimeline(ABC, Generic[T]):
    """Navigation capability over a single page."""

    @abstractmethod
    def current(self) -> CursorPage[T]:
        """The page this timeline was constructed with."""

    @abstractmethod
    async def forward(self) -> CursorPage[T]:
        """Fetch the page after the current one.

        Raises:
            NoNextCursorError: If the current page has no next cursor.
            FetchError: If the page source fails.
        """

    @abstractmethod
    async def backwards(self) -> CursorPage[T]:
        """Fetch the page before the current one.

        Raises:
            NoPreviousCursorError: If the current page has no previous cursor.
            FetchError: If the page source fails.
        """

    @abstractmethod
    def derive(self, page: CursorPage[T]) -> AsyncTimeline[T]:
        """Return a timeline over ``page`` backed by the same source."""


class CursorTimeline(AsyncTimeline[T]):
    """Timeline that navigates by handing cursor tokens to a page source."""

    def __init__(self, page: CursorPage[T], source: PageSource) -> None:
        self._page = page
        self._source = source

    @classmethod
    async def open(cls, source: PageSource, endpoint: str) -> CursorTimeline[Any]:
        """Fetch the first page of ``endpoint`` and wrap it in a timeline."""
        page = await source(endpoint, None)
        return cls(page, source)

    @property
    def source(self) -> PageSource:
        return self._source

    def current(self) -> CursorPage[T]:
        return self._page

    async def forward(self) -> CursorPage[T]:
        return await self._navigate(Direction.FORWARD)

    async def backwards(self) -> CursorPage[T]:
        return await self._navigate(Direction.BACKWARDS)

    def derive(self, page: CursorPage[T]) -> CursorTimeline[T]:
        return type(self)(page, self._source)

    async def _navigate(self, direction: Direction) -> CursorPage[T]:
        page = self._page
        cursor = getattr(page, direction.cursor_field)
        if cursor is None:
            log_timeline_exhausted(endpoint=page.endpoint, direction=direction)
            if direction is Direction.FORWARD:
                raise NoNextCursorError(
                    "No next page cursor", endpoint=page.endpoint, direction=direction
                )
            raise NoPreviousCursorError(
                "No previous page cursor", endpoint=page.endpoint, direction=direction
            )

        start = perf_counter()
        try:
            result = await self._source(page.endpoint, cursor)
        except Exception as e:
            log_page_fetch_failed(
                endpoint=page.endpoint,
                direction=direction,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        items = result.items
        log_page_fetched(
            endpoint=page.endpoint,
            direction=direction,
            item_count=len(items) if isinstance(items, Sized) else None,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return result

    def __repr__(self) -> str:
        page = self._page
        return (
            f"{type(self).__name__}(endpoint={page.endpoint!r}, "
            f"previous_cursor={page.previous_cursor!r}, next_cursor={page.next_cursor!r})"
        )
