"""
GitHub lookup module exceptions.
"""

from shared.exceptions import ExternalServiceError


class UpstreamError(ExternalServiceError):
    """Raised when GitHub cannot be reached or the call times out."""

    def __init__(self, message: str):
        super().__init__(
            f"GitHub request failed: {message}",
            service="github",
            code="UPSTREAM_ERROR",
        )


class UpstreamNotFoundError(ExternalServiceError):
    """Raised when GitHub answers with a non-success status."""

    def __init__(self, username: str, status_code: int):
        super().__init__(
            "No Github profile found",
            service="github",
            code="GITHUB_PROFILE_NOT_FOUND",
            details={"username": username, "status_code": status_code},
        )
