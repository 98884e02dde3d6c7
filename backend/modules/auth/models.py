"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """
    Decoded token payload.

    A token asserts nothing but its subject; ``exp`` is always
    ``iat`` plus the configured TTL.
    """

    sub: str = Field(..., description="Subject (user ID)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    model_config = {"frozen": True}


class TokenResponse(BaseModel):
    """Response body for successful registration and login."""

    token: str = Field(..., description="Signed access token")
