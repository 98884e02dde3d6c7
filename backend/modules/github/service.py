"""
GitHub repository lookup over the public REST API.

API Endpoint: GET /users/{username}/repos
One request per call, no retries, no caching.
"""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from .interfaces import IRepoLookup
from .models import RepoSummary
from .exceptions import UpstreamError, UpstreamNotFoundError

logger = logging.getLogger(__name__)


class GithubRepoLookup(IRepoLookup):
    """
    Lists a user's five oldest-created repositories.

    Configuration is passed in explicitly; ``transport`` lets tests
    substitute an ``httpx.MockTransport``.
    """

    PAGE_SIZE = 5

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        token: Optional[str] = None,
        timeout: float = 10.0,
        user_agent: str = "devconnector-api",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_url = api_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self._user_agent,
            "Accept": "application/vnd.github+json",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def repos_for(self, username: str) -> list[RepoSummary]:
        url = f"{self._api_url}/users/{quote(username, safe='')}/repos"
        params = {"per_page": self.PAGE_SIZE, "sort": "created", "direction": "asc"}

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=params, headers=self._headers())
        except httpx.HTTPError as e:
            logger.warning(f"GitHub request for {username} failed: {e}")
            raise UpstreamError(str(e))

        if not response.is_success:
            logger.warning(
                f"GitHub returned {response.status_code} for user {username}"
            )
            raise UpstreamNotFoundError(username, response.status_code)

        try:
            return [RepoSummary(**repo) for repo in response.json()]
        except (ValueError, TypeError) as e:
            raise UpstreamError(f"Unexpected response body: {e}")
