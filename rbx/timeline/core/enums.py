"""Core enumerations."""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Direction of travel along a cursor timeline."""

    FORWARD = "forward"
    BACKWARDS = "backwards"

    @property
    def cursor_field(self) -> str:
        """Name of the page attribute holding the cursor for this direction."""
        return "next_cursor" if self is Direction.FORWARD else "previous_cursor"
