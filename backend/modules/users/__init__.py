"""
Users module.

Handles registration, login and user lookup.

Public API:
- IUserService: Interface for user operations
- User: Public user model (no password hash)
- Users exceptions: UserAlreadyExistsError, InvalidCredentialsError, UserNotFoundError
"""

from .interfaces import IUserService
from .models import User, UserRecord, RegisterRequest, LoginRequest
from .exceptions import (
    UserAlreadyExistsError,
    InvalidCredentialsError,
    UserNotFoundError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "UserRecord",
    "RegisterRequest",
    "LoginRequest",
    # Exceptions
    "UserAlreadyExistsError",
    "InvalidCredentialsError",
    "UserNotFoundError",
]
