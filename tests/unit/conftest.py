"""Shared fixtures for unit tests.

Provides deterministic in-memory page sources so timeline and iterator
behaviour can be checked without any network access.
"""

from __future__ import annotations

from typing import Any

import pytest

from rbx.timeline.core import CursorTimeline
from rbx.timeline.models import CursorPage

ENDPOINT = "https://example.com/v1/items"


class InMemoryCollection:
    """Stable backing collection served in fixed-size pages.

    Cursor ``c{n}`` addresses page ``n``. Every call is recorded in
    ``calls``; cursors listed in ``failures`` raise instead of answering.
    """

    def __init__(self, items: list[Any], page_size: int, endpoint: str = ENDPOINT) -> None:
        self.items = list(items)
        self.page_size = page_size
        self.endpoint = endpoint
        self.calls: list[tuple[str, str | None]] = []
        self.failures: dict[str, Exception] = {}

    def page_at(self, index: int) -> CursorPage[list[Any]]:
        start = index * self.page_size
        end = start + self.page_size
        return CursorPage(
            endpoint=self.endpoint,
            previous_cursor=f"c{index - 1}" if index > 0 else None,
            next_cursor=f"c{index + 1}" if end < len(self.items) else None,
            items=self.items[start:end],
        )

    async def __call__(self, endpoint: str, cursor: str | None) -> CursorPage[list[Any]]:
        self.calls.append((endpoint, cursor))
        if cursor in self.failures:
            raise self.failures[cursor]
        index = 0 if cursor is None else int(cursor[1:])
        return self.page_at(index)

    def timeline(self, index: int = 0) -> CursorTimeline[list[Any]]:
        return CursorTimeline(self.page_at(index), self)


class ScriptedSource:
    """Page source answering from a fixed ``cursor -> page`` mapping."""

    def __init__(self, pages: dict[str, CursorPage[Any]]) -> None:
        self.pages = pages
        self.calls: list[tuple[str, str | None]] = []

    async def __call__(self, endpoint: str, cursor: str | None) -> CursorPage[Any]:
        self.calls.append((endpoint, cursor))
        return self.pages[cursor]


@pytest.fixture
def collection():
    """Factory for in-memory collections."""
    return InMemoryCollection


@pytest.fixture
def scripted():
    """Factory for scripted page sources."""
    return ScriptedSource


@pytest.fixture
def endpoint() -> str:
    return ENDPOINT
