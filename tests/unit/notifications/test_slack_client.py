"""Tests for the Slack and GitHub HTTP clients."""

import json

import httpx
import pytest

from mou_deploy.errors import NotificationError
from mou_deploy.notifications import GitHubClient, SlackClient


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestSlackClient:
    """Tests for SlackClient.post_message."""

    @pytest.mark.asyncio
    async def test_posts_message(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"ok": True, "ts": "1.2"})

        async with mock_client(handler) as http:
            body = await SlackClient("xoxb-token", client=http).post_message(
                "#deploys", [{"type": "divider"}], "Deployed myApp to staging"
            )

        assert body["ts"] == "1.2"
        request = requests[0]
        assert str(request.url) == "https://slack.com/api/chat.postMessage"
        assert request.headers["Authorization"] == "Bearer xoxb-token"
        assert json.loads(request.content) == {
            "channel": "#deploys",
            "blocks": [{"type": "divider"}],
            "text": "Deployed myApp to staging",
        }

    @pytest.mark.asyncio
    async def test_slack_error(self) -> None:
        """Slack answers HTTP 200 with ok false for API errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"ok": False, "error": "channel_not_found"})

        async with mock_client(handler) as http:
            with pytest.raises(NotificationError) as excinfo:
                await SlackClient("xoxb-token", client=http).post_message("#x", [], "t")

        assert excinfo.value.message == "Slack API error: channel_not_found"
        assert excinfo.value.response["error"] == "channel_not_found"

    @pytest.mark.asyncio
    async def test_http_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        async with mock_client(handler) as http:
            with pytest.raises(NotificationError) as excinfo:
                await SlackClient("xoxb-token", client=http).post_message("#x", [], "t")

        assert excinfo.value.status_code == 503
        assert excinfo.value.message == "Slack API returned HTTP 503"


class TestGitHubClient:
    """Tests for the commit and release lookups."""

    @pytest.mark.asyncio
    async def test_get_commit(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"sha": "abc"})

        async with mock_client(handler) as http:
            commit = await GitHubClient("gh-token", client=http).get_commit(
                "minddocdev", "mou-deploy", "v1.0.0"
            )

        assert commit == {"sha": "abc"}
        assert str(requests[0].url) == (
            "https://api.github.com/repos/minddocdev/mou-deploy/commits/v1.0.0"
        )
        assert requests[0].headers["Authorization"] == "Bearer gh-token"

    @pytest.mark.asyncio
    async def test_missing_release_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/repos/minddocdev/mou-deploy/releases/tags/main"
            return httpx.Response(404, json={"message": "Not Found"})

        async with mock_client(handler) as http:
            with pytest.raises(httpx.HTTPStatusError):
                await GitHubClient(
                    "gh-token", api_url="https://api.github.com/", client=http
                ).get_release_by_tag("minddocdev", "mou-deploy", "main")
