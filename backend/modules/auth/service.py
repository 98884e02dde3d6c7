"""
Token service implementation.

Issues and verifies HS256 JWTs that assert a single subject (user ID).
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
import jwt

from .interfaces import ITokenService
from .models import TokenClaims
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    SigningError,
)

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_TOKEN_TTL = timedelta(hours=10)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenService(ITokenService):
    """
    Implementation of the token service.

    The secret and TTL are handed in by the caller (the service container
    reads them from Settings once at startup). Expiry is checked against
    the injected clock rather than PyJWT's wall clock so it can be tested
    by moving the clock.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Optional[Clock] = None,
    ):
        self._secret = secret
        self._ttl = ttl
        self._clock = clock or utc_now

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, subject_id: str) -> str:
        """Issue a token for ``subject_id`` expiring ``ttl`` from now."""
        if not self._secret:
            raise SigningError("JWT secret not configured")

        issued_at = int(self._clock().timestamp())
        claims = TokenClaims(
            sub=str(subject_id),
            iat=issued_at,
            exp=issued_at + int(self._ttl.total_seconds()),
        )

        try:
            return jwt.encode(claims.model_dump(), self._secret, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise SigningError(str(e))

    def decode(self, token: str) -> TokenClaims:
        """
        Decode and validate a token, returning its claims.

        Raises:
            MissingTokenError: If token is empty
            InvalidTokenError: If token is malformed or badly signed
            ExpiredTokenError: If the clock is at or past ``exp``
        """
        if not token:
            raise MissingTokenError()

        if not self._secret:
            raise InvalidTokenError("Server authentication not configured")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sub", "iat", "exp"],
                },
            )
            claims = TokenClaims(**payload)
        except (jwt.PyJWTError, ValueError) as e:
            raise InvalidTokenError(f"Token is not valid: {e}")

        if self._clock().timestamp() >= claims.exp:
            raise ExpiredTokenError()

        return claims

    def verify(self, token: str) -> str:
        """Verify a token and return its subject."""
        return self.decode(token).sub

