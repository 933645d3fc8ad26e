"""Minimal GitHub REST client for commit and release lookups."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from mou_deploy.constants import DeploymentConstants


class GitHubClient:
    """Async client for the few GitHub endpoints a notification needs.

    Requests share ``client`` when one is given; otherwise each request
    opens its own connection.
    """

    def __init__(
        self,
        token: str,
        api_url: str = DeploymentConstants.GITHUB_API_URL,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.token = token
        self.api_url = api_url.rstrip("/")
        self._client = client

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
        }

    async def _get(self, path: str) -> dict[str, Any]:
        url = f"{self.api_url}{path}"
        if self._client is not None:
            response = await self._client.get(url, headers=self.headers)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(url, headers=self.headers)
        response.raise_for_status()
        data: dict[str, Any] = response.json()
        return data

    async def get_commit(self, owner: str, repo: str, ref: str) -> dict[str, Any]:
        """Fetch a commit by sha, branch or tag.

        Raises:
            httpx.HTTPStatusError: If GitHub answers with an error status
        """
        data = await self._get(f"/repos/{owner}/{repo}/commits/{ref}")
        logger.debug(f"commit response: {data}")
        return data

    async def get_release_by_tag(
        self, owner: str, repo: str, tag: str
    ) -> dict[str, Any]:
        """Fetch the release published for a tag.

        Raises:
            httpx.HTTPStatusError: If no release exists for the tag
        """
        data = await self._get(f"/repos/{owner}/{repo}/releases/tags/{tag}")
        logger.debug(f"release response: {data}")
        return data
