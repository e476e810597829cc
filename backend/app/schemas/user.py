"""User schemas."""

from typing import List

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    username: str = Field(description="Unique username")
    name: str = Field(description="Display name")
    avatar_url: str = Field(description="Link to the user's avatar image")

    model_config = {"from_attributes": True}


class UserListResponse(BaseModel):
    """Returned by GET /api/users."""
    users: List[UserResponse]
