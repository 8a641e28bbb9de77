"""Data models.

All models are immutable Pydantic v2 models (frozen=True). Response
fields arrive in lower camel case and are exposed under snake_case names;
both spellings are accepted on construction.
"""

from .page import CursorPage
from .user import User, UserQuery

__all__ = [
    "CursorPage",
    "User",
    "UserQuery",
]
