"""Structured logging for timeline navigation and prefetching.

Every helper emits a single event-name message with its fields in
``extra`` so log processors can pick them up without parsing text.
"""

from __future__ import annotations

import logging

from .enums import Direction

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint: str,
    direction: Direction,
    item_count: int | None,
    latency_ms: float,
) -> None:
    """Log a successful navigation fetch.

    Args:
        endpoint: Endpoint the page was requested from
        direction: Direction of travel
        item_count: Number of items in the page payload, if it is sized
        latency_ms: Round-trip latency in milliseconds
    """
    logger.info(
        "page_fetched",
        extra={
            "endpoint": endpoint,
            "direction": direction.value,
            "item_count": item_count,
            "latency_ms": latency_ms,
        },
    )


def log_page_fetch_failed(
    *,
    endpoint: str,
    direction: Direction,
    error_type: str,
    error_message: str,
) -> None:
    """Log a navigation fetch that raised."""
    logger.error(
        "page_fetch_failed",
        extra={
            "endpoint": endpoint,
            "direction": direction.value,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_timeline_exhausted(*, endpoint: str, direction: Direction) -> None:
    """Log navigation past an end of the collection."""
    logger.debug(
        "timeline_exhausted",
        extra={"endpoint": endpoint, "direction": direction.value},
    )


def log_lookahead_failed(*, operation: str, error_type: str, error_message: str) -> None:
    """Log a non-exhaustion failure that an advisory operation did not raise.

    Args:
        operation: Name of the operation that swallowed the failure
        error_type: Exception class name
        error_message: Exception message
    """
    logger.warning(
        "lookahead_failed",
        extra={
            "operation": operation,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_prefetch_complete(*, requested: int, buffered: int, pages: int) -> None:
    """Log the outcome of an eager prefetch.

    Args:
        requested: Item budget the caller asked for
        buffered: Items counted against the budget
        pages: Pages visited, including the initial one
    """
    logger.info(
        "prefetch_complete",
        extra={
            "requested": requested,
            "buffered": buffered,
            "pages": pages,
            "exhausted": buffered < requested,
        },
    )
