"""Roblox users API constants.

Centralizes URLs and paths so the client can stay small.
"""

from __future__ import annotations

USERS_BASE_URL = "https://users.roblox.com"

API_VERSION = "v1"

# Path templates, relative to the users base URL
SEARCH_PATH = f"/{API_VERSION}/users/search"
USER_PATH = f"/{API_VERSION}/users/{{user_id}}"

# Seconds
DEFAULT_TIMEOUT = 30.0


def get_search_url(base_url: str = USERS_BASE_URL) -> str:
    """Get the user search collection URL.

    Examples:
        >>> get_search_url()
        'https://users.roblox.com/v1/users/search'
    """
    return f"{base_url.rstrip('/')}{SEARCH_PATH}"


def get_user_url(user_id: int, base_url: str = USERS_BASE_URL) -> str:
    """Get the detail URL for a single user.

    Examples:
        >>> get_user_url(1)
        'https://users.roblox.com/v1/users/1'
    """
    return f"{base_url.rstrip('/')}{USER_PATH.format(user_id=user_id)}"
