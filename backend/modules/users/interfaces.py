"""
Users module interface.

The API layer and the profiles module depend on IUserService,
not on the concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import User


@runtime_checkable
class IUserService(Protocol):
    """Interface for user registration, login and lookup."""

    async def register(self, name: str, email: str, password: str) -> str:
        """
        Register a new user and return a token for them.

        Raises:
            ValidationError: If any field is missing or malformed
            UserAlreadyExistsError: If the email is taken
        """
        ...

    async def login(self, email: str, password: str) -> str:
        """
        Check credentials and return a token.

        Raises:
            ValidationError: If email is malformed or password missing
            InvalidCredentialsError: If email is unknown or password wrong
        """
        ...

    async def get_authenticated(self, subject_id: str) -> User:
        """
        Get the user a verified token refers to.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        ...

    async def get_user(self, user_id: str) -> Optional[User]:
        """Get a user by ID, or None."""
        ...

    async def delete_user(self, user_id: str) -> bool:
        """Delete a user. Returns True if a record was removed."""
        ...
