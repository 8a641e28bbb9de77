"""Roblox users API client.

Thin glue over the cursor core: it builds the initial search page and
hands out timelines and item iterators over it. All pagination behaviour
lives in ``rbx.timeline.core``.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError
from yarl import URL

from ...core.exceptions import DecodeError
from ...core.iterator import ItemIterator
from ...core.timeline import CursorTimeline
from ...models.user import User, UserQuery
from ...runtime.rest import HTTPClient, HTTPPageSource
from .config import DEFAULT_TIMEOUT, USERS_BASE_URL, get_search_url, get_user_url

logger = logging.getLogger(__name__)


class RobloxUsersClient:
    """Client for user search and lookup."""

    def __init__(
        self,
        client: HTTPClient | None = None,
        base_url: str = USERS_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url
        self._http = client or HTTPClient(timeout=timeout)
        self._owns_client = client is None
        self._search_source = HTTPPageSource(list[UserQuery], client=self._http)

    @property
    def search_source(self) -> HTTPPageSource:
        """Page source used for search results."""
        return self._search_source

    async def search(self, keyword: str) -> CursorTimeline[list[UserQuery]]:
        """Fetch the first page of users matching ``keyword``.

        Raises:
            ValueError: If ``keyword`` is blank.
            FetchError: If the request fails.
        """
        keyword = keyword.strip()
        if not keyword:
            raise ValueError("keyword must not be empty")
        endpoint = str(URL(get_search_url(self.base_url)).with_query({"keyword": keyword}))
        logger.debug("user_search", extra={"keyword": keyword, "endpoint": endpoint})
        return await self._search_source.open(endpoint)

    async def iterate_search(self, keyword: str, prefetch: int = 0) -> ItemIterator[UserQuery]:
        """Item iterator over every user matching ``keyword``.

        Args:
            keyword: Search keyword
            prefetch: Number of users to fetch up front (0 fetches only the
                first page)
        """
        timeline = await self.search(keyword)
        if prefetch <= 0:
            return ItemIterator(timeline)
        iterator, _ = await ItemIterator.with_capacity(timeline, prefetch)
        return iterator

    async def get_user(self, user_id: int) -> User:
        """Fetch the detailed record of one user.

        Raises:
            FetchError: If the request fails or the body is not a user.
        """
        url = get_user_url(user_id, self.base_url)
        data = await self._http.get(url)
        try:
            return User.model_validate(data)
        except PydanticValidationError as e:
            raise DecodeError(f"Unexpected user shape from {url}: {e}", endpoint=url) from e

    async def close(self) -> None:
        if self._owns_client:
            await self._http.close()

    async def __aenter__(self) -> RobloxUsersClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
