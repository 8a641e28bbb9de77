"""HTTP client helper."""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp

from ...core.exceptions import DecodeError, TransportError


class HTTPClient:
    """Async HTTP client wrapper.

    Failures surface as ``TransportError`` (network faults, timeouts,
    non-success statuses) or ``DecodeError`` (body is not JSON). Nothing is
    retried here.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers) if headers else {}
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def _resolve(self, url: str) -> str:
        # Relative URLs are joined onto base_url
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning the decoded JSON body."""
        _, data = await self.get_with_url(url, params=params, headers=headers)
        return data

    async def get_with_url(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[str, Any]:
        """GET request returning the resolved response URL and the JSON body.

        The resolved URL is the one the body actually came from, after
        redirects.
        """
        url = self._resolve(url)
        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                if response.status >= 400:
                    raise TransportError(
                        f"HTTP {response.status} from {response.url}",
                        status_code=response.status,
                        endpoint=url,
                    )
                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise DecodeError(
                        f"Invalid JSON body from {response.url}: {e}",
                        status_code=response.status,
                        endpoint=url,
                    ) from e
                return str(response.url), data
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {url} failed: {e}", endpoint=url) from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {url} timed out", endpoint=url) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
