"""HTTP page source.

Wire contract:
    GET {endpoint}?limit={limit}&cursor={cursor}
    -> {"previousPageCursor": str | null, "nextPageCursor": str | null, "data": T}

Query parameters already on the endpoint (``keyword=...``) are kept; the
paging parameters are always set here. Pages are stamped with the URL the
response actually came from, minus the paging parameters, so continuation
follows redirects and normalisation done by the server.
"""

from __future__ import annotations

from typing import Any

from yarl import URL

from ...core.constants import CURSOR_PARAM, LIMIT_PARAM, MAX_PAGE_SIZE, PAGING_PARAMS
from ...core.exceptions import DecodeError
from ...core.timeline import CursorTimeline
from ...models.page import CursorPage
from .http_client import HTTPClient


def strip_paging_params(url: str) -> str:
    """Remove the ``limit`` and ``cursor`` query parameters from ``url``."""
    parsed = URL(url)
    kept = [(key, value) for key, value in parsed.query.items() if key not in PAGING_PARAMS]
    return str(parsed.with_query(kept))


class HTTPPageSource:
    """Page source fetching cursor pages over HTTP.

    Instances are callables matching ``PageSource``. The HTTP client is
    closed by ``close()`` only when this source created it.
    """

    def __init__(
        self,
        item_type: Any = None,
        client: HTTPClient | None = None,
        limit: int = MAX_PAGE_SIZE,
    ) -> None:
        """Initialize page source.

        Args:
            item_type: Payload type pages are validated against, e.g.
                ``list[UserQuery]``. ``None`` keeps payloads as decoded.
            client: HTTP client to use; a private one is created if omitted
            limit: Page size requested from the server
        """
        if not 1 <= limit <= MAX_PAGE_SIZE:
            raise ValueError(f"limit must be between 1 and {MAX_PAGE_SIZE}")
        self.item_type = item_type
        self.limit = limit
        self._client = client or HTTPClient()
        self._owns_client = client is None

    @property
    def client(self) -> HTTPClient:
        return self._client

    def build_url(self, endpoint: str, cursor: str | None = None) -> str:
        """Endpoint with the paging query parameters applied."""
        query = {LIMIT_PARAM: str(self.limit)}
        if cursor is not None:
            query[CURSOR_PARAM] = cursor
        return str(URL(endpoint).update_query(query))

    async def __call__(self, endpoint: str, cursor: str | None = None) -> CursorPage[Any]:
        """Fetch the page of ``endpoint`` at ``cursor`` (first page if ``None``).

        Raises:
            TransportError: On network failure or non-success status.
            DecodeError: If the body is not a page of ``item_type``.
        """
        resolved, body = await self._client.get_with_url(self.build_url(endpoint, cursor))
        resolved = strip_paging_params(resolved)
        try:
            return CursorPage.from_response(resolved, body, self.item_type)
        except ValueError as e:
            raise DecodeError(
                f"Unexpected page shape from {resolved}: {e}", endpoint=resolved
            ) from e

    fetch = __call__

    def timeline(self, page: CursorPage[Any]) -> CursorTimeline[Any]:
        """Timeline over ``page`` that navigates through this source."""
        return CursorTimeline(page, self)

    async def open(self, endpoint: str) -> CursorTimeline[Any]:
        """Fetch the first page of ``endpoint`` as a timeline."""
        return await CursorTimeline.open(self, endpoint)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.close()

    async def __aenter__(self) -> HTTPPageSource:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
