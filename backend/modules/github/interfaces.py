"""
GitHub lookup interface.
"""

from typing import Protocol, runtime_checkable

from .models import RepoSummary


@runtime_checkable
class IRepoLookup(Protocol):
    """Interface for listing a user's public repositories."""

    async def repos_for(self, username: str) -> list[RepoSummary]:
        """
        List a user's first repositories, oldest first.

        Raises:
            UpstreamNotFoundError: If GitHub answers with a non-success status
            UpstreamError: On transport failure or timeout
        """
        ...
