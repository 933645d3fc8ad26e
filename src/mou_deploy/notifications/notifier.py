"""Deployment notifications posted to Slack.

Both notifications share a summary of the deployed commit. The commit
is always looked up; the GitHub release for the ref is optional and a
failed lookup falls back to the commit message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
from loguru import logger

from mou_deploy.constants import DeploymentConstants

from .messages import (
    DeploymentSummary,
    build_failure_message,
    build_success_message,
)
from .slack import SlackClient

if TYPE_CHECKING:
    from mou_deploy.console import CLIConsole
    from mou_deploy.config.models import SlackConfig
    from mou_deploy.context import GitHubContext

    from .github import GitHubClient


class SlackNotifier:
    """Builds and posts deployment success and failure messages."""

    def __init__(
        self,
        github: GitHubClient,
        context: GitHubContext,
        console: CLIConsole,
        constants: DeploymentConstants | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the notifier.

        Args:
            github: Client for commit and release lookups
            context: Run information (repository, sha, event payload)
            console: Console for progress output
            constants: Optional constants (Slack endpoint)
            http: Optional shared HTTP client for Slack calls
        """
        self.github = github
        self.context = context
        self.console = console
        self.constants = constants or DeploymentConstants()
        self.http = http

    async def build_summary(self, app: str, environment: str) -> DeploymentSummary:
        """Collect commit, release and deployment details for a message."""
        context = self.context
        deployment = context.deployment
        logger.debug(f"deployment payload: {deployment}")
        logger.debug(f"repository payload: {context.payload.get('repository')}")

        sha = deployment.get("sha") or context.sha
        ref = deployment.get("ref") or sha
        deployment_id = str(deployment.get("id", "-"))
        repo_url = context.repository_url

        commit = await self.github.get_commit(context.owner, context.repo, ref)
        author: dict[str, Any] = commit.get("author") or {}
        commit_message = commit["commit"]["message"]

        try:
            release = await self.github.get_release_by_tag(
                context.owner, context.repo, ref
            )
            ref_url = release["html_url"]
            description = release.get("body") or f"```\n{commit_message}\n```"
        except (httpx.HTTPError, KeyError) as e:
            self.console.warn(f'Unable to retrieve release for tag "{ref}": {e}')
            ref_url = f"{repo_url}/commits/{ref}"
            description = f"```\n{commit_message}\n```"

        return DeploymentSummary(
            app=app,
            environment=environment,
            repo=context.repo,
            repo_url=repo_url,
            sha=sha,
            ref=ref,
            ref_url=ref_url,
            description=description,
            author_name=commit["commit"]["author"]["name"],
            author_login=author.get("login"),
            author_url=author.get("html_url"),
            avatar_url=author.get("avatar_url"),
            commit_url=commit["html_url"],
            deployment_id=deployment_id,
            is_production=environment == self.constants.PRODUCTION_ENVIRONMENT,
        )

    async def post(
        self, slack: SlackConfig, blocks: list[dict[str, Any]], text: str
    ) -> None:
        client = SlackClient(
            slack.token, api_url=self.constants.SLACK_API_URL, client=self.http
        )
        await client.post_message(slack.channel, blocks, text)

    async def notify_success(
        self, slack: SlackConfig, environment: str, app: str, app_url: str
    ) -> None:
        """Post the deployment success message."""
        self.console.info("Send slack deployment success notification")
        summary = await self.build_summary(app, environment)
        await self.post(
            slack,
            build_success_message(summary, app_url),
            f"Deployed {app} to {environment}",
        )

    async def notify_failure(
        self, slack: SlackConfig, error: BaseException, environment: str, app: str
    ) -> None:
        """Post the deployment failure message for ``error``.

        Captured output and exit status are taken from the error when it
        carries them (see DeploymentError).
        """
        self.console.info("Send slack deployment error notification")
        summary = await self.build_summary(app, environment)
        await self.post(
            slack,
            build_failure_message(
                summary,
                getattr(error, "message", None) or str(error),
                returncode=getattr(error, "returncode", None),
                stderr=getattr(error, "stderr", None),
                stdout=getattr(error, "stdout", None),
            ),
            f"Error deploying {app} to {environment}",
        )
