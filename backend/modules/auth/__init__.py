"""
Authentication module.

Handles password hashing and signed token issuance/verification.

Public API:
- IPasswordHasher, ITokenService: Interfaces for auth operations
- BcryptPasswordHasher, TokenService: Implementations
- TokenClaims, TokenResponse: Models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IPasswordHasher, ITokenService
from .models import TokenClaims, TokenResponse
from .passwords import BcryptPasswordHasher
from .service import TokenService
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    SigningError,
)

__all__ = [
    # Interfaces
    "IPasswordHasher",
    "ITokenService",
    # Implementations
    "BcryptPasswordHasher",
    "TokenService",
    # Models
    "TokenClaims",
    "TokenResponse",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "SigningError",
]
