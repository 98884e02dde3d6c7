"""
Users module exceptions.
"""

from shared.exceptions import ConflictError, AuthenticationError, NotFoundError


class UserAlreadyExistsError(ConflictError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(
            "User already exists",
            code="USER_ALREADY_EXISTS",
            details={"email": email},
        )


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    The message is the same whether the email or the password was wrong.
    """

    def __init__(self):
        super().__init__("Invalid Credentials", code="INVALID_CREDENTIALS")


class UserNotFoundError(NotFoundError):
    """Raised when a user ID no longer resolves to a record."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )
