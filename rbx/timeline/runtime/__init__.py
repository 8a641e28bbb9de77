"""Runtime layer: transports and page sources."""

from .rest import HTTPClient, HTTPPageSource

__all__ = ["HTTPClient", "HTTPPageSource"]
