"""
Users module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A registered user as exposed by the API.

    The password hash is deliberately not part of this model; it only
    exists on UserRecord inside the repository/service boundary.
    """

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique email address")
    avatar: Optional[str] = Field(None, description="Gravatar URL")
    created_at: Optional[datetime] = Field(None, description="Registration time")


class UserRecord(User):
    """Stored user including the password hash."""

    password_hash: str = Field(..., description="bcrypt digest")

    def to_public(self) -> User:
        return User(**self.model_dump(exclude={"password_hash"}))


class RegisterRequest(BaseModel):
    """
    Registration payload.

    Fields are optional here so the service can report every missing or
    malformed field in one response.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Login payload."""

    email: Optional[str] = None
    password: Optional[str] = None
