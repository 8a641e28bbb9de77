"""REST runtime abstractions."""

from .http_client import HTTPClient
from .source import HTTPPageSource, strip_paging_params

__all__ = [
    "HTTPClient",
    "HTTPPageSource",
    "strip_paging_params",
]
