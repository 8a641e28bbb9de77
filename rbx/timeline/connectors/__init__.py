"""Service connectors built on the cursor core."""

from .roblox import RobloxUsersClient

__all__ = ["RobloxUsersClient"]
