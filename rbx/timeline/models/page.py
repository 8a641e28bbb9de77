"""Cursor page data model."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class CursorPage(BaseModel, Generic[T]):
    """One fetched page of a cursor-paginated collection.

    Pages are immutable. Moving through a collection always yields a new
    page; nothing here is updated in place.
    """

    endpoint: str = Field(..., min_length=1)
    previous_cursor: str | None = Field(default=None, alias="previousPageCursor")
    next_cursor: str | None = Field(default=None, alias="nextPageCursor")
    items: T = Field(..., alias="data")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def has_next(self) -> bool:
        """Whether a later page exists."""
        return self.next_cursor is not None

    @property
    def has_previous(self) -> bool:
        """Whether an earlier page exists."""
        return self.previous_cursor is not None

    def with_items(self, items: Any) -> CursorPage[Any]:
        """Return a copy of this page carrying a different payload."""
        if isinstance(items, list):
            items = list(items)
        return self.model_copy(update={"items": items})

    @classmethod
    def from_response(
        cls,
        endpoint: str,
        body: Any,
        item_type: Any = None,
    ) -> CursorPage[Any]:
        """Build a page from a decoded response body.

        Args:
            endpoint: Resolved endpoint the body was fetched from
            body: Decoded JSON object with ``previousPageCursor``,
                ``nextPageCursor`` and ``data`` keys
            item_type: Payload type to validate ``data`` against, e.g.
                ``list[UserQuery]``. Omit to keep the payload as decoded.

        Raises:
            ValueError: If the body is not an object or fails validation
                (pydantic's ``ValidationError`` is a ``ValueError``).
        """
        if not isinstance(body, dict):
            raise ValueError(f"Expected a JSON object, got {type(body).__name__}")
        model = cls[item_type] if item_type is not None else cls
        return model.model_validate({**body, "endpoint": endpoint})
