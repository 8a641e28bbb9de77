"""User records returned by the users API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserQuery(BaseModel):
    """A user as returned by a search query."""

    id: int = Field(..., ge=0)
    name: str
    display_name: str = Field(..., alias="displayName")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class User(BaseModel):
    """Detailed user record."""

    description: str = ""
    created: datetime
    is_banned: bool = Field(..., alias="isBanned")
    id: int = Field(..., ge=0)
    name: str
    display_name: str = Field(..., alias="displayName")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
