"""Unit tests for the CursorPage model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rbx.timeline.models import CursorPage, UserQuery

ENDPOINT = "https://users.roblox.com/v1/users/search?keyword=test"


def test_from_response_reads_camel_case_body():
    """Response fields map onto snake_case attributes."""
    body = {"previousPageCursor": None, "nextPageCursor": "abc", "data": [1, 2]}

    page = CursorPage.from_response(ENDPOINT, body)

    assert page.endpoint == ENDPOINT
    assert page.previous_cursor is None
    assert page.next_cursor == "abc"
    assert page.items == [1, 2]
    assert page.has_next
    assert not page.has_previous


def test_from_response_validates_item_type():
    """Payload is decoded into the requested record type."""
    body = {
        "previousPageCursor": "p",
        "nextPageCursor": None,
        "data": [{"id": 1, "name": "builderman", "displayName": "Builder"}],
    }

    page = CursorPage.from_response(ENDPOINT, body, list[UserQuery])

    assert page.items == [UserQuery(id=1, name="builderman", display_name="Builder")]
    assert page.has_previous
    assert not page.has_next


def test_from_response_rejects_wrong_item_shape():
    body = {"nextPageCursor": None, "data": [{"id": "not-a-number"}]}

    with pytest.raises(ValidationError):
        CursorPage.from_response(ENDPOINT, body, list[UserQuery])


def test_from_response_rejects_non_object_body():
    with pytest.raises(ValueError, match="Expected a JSON object"):
        CursorPage.from_response(ENDPOINT, [1, 2, 3])


def test_from_response_requires_data():
    with pytest.raises(ValidationError):
        CursorPage.from_response(ENDPOINT, {"nextPageCursor": "abc"})


def test_resolved_endpoint_wins_over_body():
    """The endpoint passed in is stamped even if the body carries one."""
    page = CursorPage.from_response(ENDPOINT, {"data": [], "endpoint": "https://other"})
    assert page.endpoint == ENDPOINT


def test_page_is_frozen():
    page = CursorPage(endpoint=ENDPOINT, items=[1])

    with pytest.raises(ValidationError):
        page.next_cursor = "x"


def test_with_items_returns_new_page():
    page = CursorPage(endpoint=ENDPOINT, items=[1, 2], next_cursor="n", previous_cursor="p")
    replacement = [3]

    other = page.with_items(replacement)
    replacement.append(4)

    assert other is not page
    assert other.items == [3]
    assert other.next_cursor == "n"
    assert other.previous_cursor == "p"
    assert page.items == [1, 2]


def test_endpoint_must_not_be_empty():
    with pytest.raises(ValidationError):
        CursorPage(endpoint="", items=[])
