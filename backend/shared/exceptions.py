"""
Base exception classes for the DevConnector backend.

Each module should define its own exceptions that inherit from these bases.
API error handlers map the bases to HTTP responses, so a module exception
only needs the right parent to be reported correctly.
"""

from typing import Optional, Any


class DevConnectorError(Exception):
    """
    Base exception for all DevConnector errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(DevConnectorError):
    """Resource not found."""

    pass


class ValidationError(DevConnectorError):
    """
    Input validation failed.

    Carries one entry per violated field so callers can report every
    problem at once instead of failing on the first.
    """

    def __init__(
        self,
        errors: list[dict[str, str]],
        message: str = "Validation failed",
        code: Optional[str] = None,
    ):
        super().__init__(message, code=code, details={"errors": errors})

    @property
    def errors(self) -> list[dict[str, str]]:
        return self.details["errors"]


class ConflictError(DevConnectorError):
    """The request would violate a uniqueness rule."""

    pass


class DuplicateKeyError(ConflictError):
    """A write hit a unique key already held by another document."""

    def __init__(self, collection: str, reason: str):
        super().__init__(
            f"Duplicate key in {collection}: {reason}",
            code="DUPLICATE_KEY",
            details={"collection": collection},
        )


class AuthenticationError(DevConnectorError):
    """Authentication failed (bad credentials)."""

    pass


class AuthorizationError(DevConnectorError):
    """Authorization failed (missing, invalid or expired token)."""

    pass


class FatalStorageError(DevConnectorError):
    """The document store failed in a way the request cannot recover from."""

    def __init__(self, operation: str, collection: str, reason: str):
        super().__init__(
            f"Storage {operation} on {collection} failed: {reason}",
            code="STORAGE_ERROR",
            details={"operation": operation, "collection": collection},
        )


class ExternalServiceError(DevConnectorError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
