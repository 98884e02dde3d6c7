"""
Profiles module exceptions.
"""

from shared.exceptions import NotFoundError

NO_PROFILE_FOR_USER = "There is no profile for this user"


class ProfileNotFoundError(NotFoundError):
    """Raised when a user has no profile."""

    def __init__(self, user_id: str, message: str = "Profile not found"):
        super().__init__(
            message,
            code="PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )
