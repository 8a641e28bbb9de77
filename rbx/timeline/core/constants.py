"""Shared pagination constants."""

from __future__ import annotations

# Largest page the server hands out; also the per-page prefetch budget.
MAX_PAGE_SIZE = 100

# Query parameters owned by the pager. They are stripped from resolved
# endpoints so continuation requests never carry stale values.
LIMIT_PARAM = "limit"
CURSOR_PARAM = "cursor"
PAGING_PARAMS = (LIMIT_PARAM, CURSOR_PARAM)
