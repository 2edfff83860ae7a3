"""
NexParcel Backend — User Schemas
==================================

What:  User documents as posted by the client and returned by the API.

User documents are open: besides `email` the client sends whatever profile
fields it has (name, photo, phone ...), and they are stored as given.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Body of POST /users."""
    model_config = ConfigDict(extra="allow")

    email: str = Field(min_length=3, description="Account email (unique)")


class UserListResponse(BaseModel):
    """
    Body of GET /users.

    `count` is the total number of users, not the size of this page, so
    the client can compute the number of pages.
    """
    users: List[Dict[str, Any]] = Field(description="User documents on this page")
    count: int = Field(description="Total number of users")
