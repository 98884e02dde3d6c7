"""
Authentication module exceptions.

Token failures are authorization errors: they reject a request before it
reaches business logic. Credential failures live in the users module.
"""

from shared.exceptions import DevConnectorError, AuthorizationError


class MissingTokenError(AuthorizationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "No token, authorization denied"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthorizationError):
    """Raised when a token is malformed or its signature does not verify."""

    def __init__(self, message: str = "Token is not valid"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthorizationError):
    """Raised when a token is past its expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class SigningError(DevConnectorError):
    """Raised when a token cannot be signed. Not retried."""

    def __init__(self, reason: str):
        super().__init__(
            f"Could not sign token: {reason}",
            code="SIGNING_ERROR",
            details={"reason": reason},
        )
