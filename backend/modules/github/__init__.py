"""
GitHub lookup module.

Proxies the public repository listing shown on profiles.

Public API:
- IRepoLookup: Interface for repository listing
- GithubRepoLookup: httpx implementation
- RepoSummary: Repository model
- Exceptions: UpstreamError, UpstreamNotFoundError
"""

from .interfaces import IRepoLookup
from .models import RepoSummary
from .service import GithubRepoLookup
from .exceptions import UpstreamError, UpstreamNotFoundError

__all__ = [
    "IRepoLookup",
    "RepoSummary",
    "GithubRepoLookup",
    "UpstreamError",
    "UpstreamNotFoundError",
]
