"""Item-level iteration over a timeline of list pages.

The iterator turns page-granularity fetching into item-granularity
consumption. It holds one timeline plus a FIFO of the items of that
timeline's page not yet handed out; when the FIFO runs dry it moves the
timeline forward and replaces it wholesale.

States:
    Draining   items are buffered, ``next()`` does no I/O
    Advancing  buffer empty, ``next()`` fetches the next page
    Terminal   no next cursor, ``next()`` keeps raising NoNextCursorError
"""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

from .constants import MAX_PAGE_SIZE
from .exceptions import NoNextCursorError
from .telemetry import log_lookahead_failed, log_prefetch_complete
from .timeline import AsyncTimeline

T = TypeVar("T")


class ItemIterator(Generic[T]):
    """Pull-based async sequence of the items across a timeline's pages.

    Items come out in server order and never twice. Exhaustion is reported
    by ``NoNextCursorError``, not by a sentinel value; check
    ``has_remaining()`` first or catch it. ``async for`` ends on exhaustion
    and lets fetch errors through.

    Instances are not safe for concurrent consumers; wrap calls in a lock
    if several tasks share one iterator.
    """

    def __init__(self, timeline: AsyncTimeline[list[T]]) -> None:
        self._timeline = timeline
        self._buffer: deque[T] = deque(timeline.current().items)

    @property
    def timeline(self) -> AsyncTimeline[list[T]]:
        """The timeline currently held."""
        return self._timeline

    @property
    def buffered(self) -> int:
        """Number of items available without a fetch."""
        return len(self._buffer)

    async def next(self) -> T:
        """Return the next item, fetching pages as needed.

        Empty pages are walked past. State is only replaced after a fetch
        succeeds, so a failed or cancelled call can simply be retried.

        Raises:
            NoNextCursorError: If the collection is exhausted.
            FetchError: If fetching the next page fails.
        """
        while not self._buffer:
            page = await self._timeline.forward()
            self._timeline = self._timeline.derive(page)
            self._buffer = deque(page.items)
        return self._buffer.popleft()

    async def has_remaining(self) -> bool:
        """Whether a subsequent ``next()`` would succeed.

        Answers from the buffer when possible. Otherwise walks forward
        speculatively without committing anything, which costs at least one
        round-trip. Any failure counts as "no more items"; failures other
        than exhaustion are logged.
        """
        if self._buffer:
            return True

        timeline = self._timeline
        try:
            while True:
                page = await timeline.forward()
                if page.items:
                    return True
                timeline = timeline.derive(page)
        except NoNextCursorError:
            return False
        except Exception as e:
            log_lookahead_failed(
                operation="has_remaining",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    async def take(self, n: int) -> list[T]:
        """Return up to ``n`` items, fewer if the collection runs out."""
        items: list[T] = []
        while len(items) < n:
            try:
                items.append(await self.next())
            except NoNextCursorError:
                break
        return items

    @classmethod
    async def with_capacity(
        cls,
        timeline: AsyncTimeline[list[T]],
        target_count: int,
    ) -> tuple[ItemIterator[T], int]:
        """Build an iterator with a run of items fetched up front.

        Pages are drained from ``timeline`` until ``target_count`` items have
        been counted, at most ``MAX_PAGE_SIZE`` per page, or until moving
        forward fails. A failed move ends prefetching without raising. Every
        item of every visited page is kept, in order, in one merged page
        carrying the first page's previous cursor and the last page's next
        cursor, so nothing fetched is lost and nothing is fetched twice.

        Args:
            timeline: Timeline positioned at the first page to drain
            target_count: Number of items wanted up front

        Returns:
            The iterator and the number of items counted against
            ``target_count``; the count is smaller when the collection ran
            out first.

        Raises:
            ValueError: If ``target_count`` is negative.
        """
        if target_count < 0:
            raise ValueError("target_count must be >= 0")

        first = timeline.current()
        collected: list[T] = []
        remaining = target_count
        pages = 1

        while True:
            items = list(timeline.current().items)
            collected.extend(items)
            remaining -= min(remaining, MAX_PAGE_SIZE, len(items))
            if remaining == 0:
                break
            try:
                page = await timeline.forward()
            except NoNextCursorError:
                break
            except Exception as e:
                log_lookahead_failed(
                    operation="with_capacity",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                break
            timeline = timeline.derive(page)
            pages += 1

        buffered = target_count - remaining
        log_prefetch_complete(requested=target_count, buffered=buffered, pages=pages)

        merged = timeline.current().model_copy(
            update={"items": collected, "previous_cursor": first.previous_cursor}
        )
        return cls(timeline.derive(merged)), buffered

    def __aiter__(self) -> ItemIterator[T]:
        return self

    async def __anext__(self) -> T:
        try:
            return await self.next()
        except NoNextCursorError:
            raise StopAsyncIteration from None
