"""Roblox connectors."""

from .config import USERS_BASE_URL, get_search_url, get_user_url
from .users import RobloxUsersClient

__all__ = [
    "RobloxUsersClient",
    "USERS_BASE_URL",
    "get_search_url",
    "get_user_url",
]
