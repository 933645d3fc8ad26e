"""Slack Web API client for posting messages."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from mou_deploy.constants import DeploymentConstants
from mou_deploy.errors import NotificationError


class SlackClient:
    """Posts messages with a bot token through ``chat.postMessage``."""

    def __init__(
        self,
        token: str,
        api_url: str = DeploymentConstants.SLACK_API_URL,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.token = token
        self.api_url = api_url.rstrip("/")
        self._client = client

    async def post_message(
        self, channel: str, blocks: list[dict[str, Any]], text: str
    ) -> dict[str, Any]:
        """Post a Block Kit message to a channel.

        Args:
            channel: Channel name or id
            blocks: Message blocks
            text: Fallback text for notifications

        Returns:
            Slack's response body

        Raises:
            NotificationError: On an HTTP error or when Slack answers
                               with ``ok: false``
        """
        url = f"{self.api_url}/chat.postMessage"
        headers = {"Authorization": f"Bearer {self.token}"}
        payload = {"channel": channel, "blocks": blocks, "text": text}

        if self._client is not None:
            response = await self._client.post(url, headers=headers, json=payload)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.post(url, headers=headers, json=payload)

        if response.is_error:
            raise NotificationError(
                f"Slack API returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        body: dict[str, Any] = response.json()
        logger.debug(f"Slack response: {body.get('response_metadata')}")
        if not body.get("ok"):
            raise NotificationError(
                f"Slack API error: {body.get('error', 'unknown_error')}",
                status_code=response.status_code,
                response=body,
            )
        return body
