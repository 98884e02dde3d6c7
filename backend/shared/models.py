"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated by the auth gate from a verified token and made available
    to route handlers via dependency injection. The token only carries the
    subject id, so that is all this model holds.
    """

    id: str = Field(..., description="User ID (token subject)")

    model_config = {
        "frozen": True,  # Make immutable for safety
    }
