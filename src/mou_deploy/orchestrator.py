"""Top-level flow of a deployment run.

A run validates every input, deploys the chart, notifies Slack about the
outcome and finally registers the release in Sentry:

    validate -> deploy -> notify (success | failure) -> register release

Validation failures stop the run before any side effect. A failed
deployment is reported to Slack and then re-raised so the run fails.
Sentry registration does not depend on a deployment having happened.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import httpx
from loguru import logger

from mou_deploy.config import validate_inputs
from mou_deploy.deployment import HelmDeployer
from mou_deploy.notifications import GitHubClient, SlackNotifier
from mou_deploy.releases import SentryReleaseRegistrar

if TYPE_CHECKING:
    from mou_deploy.console import CLIConsole
    from mou_deploy.config.models import (
        ActionConfig,
        ActionInputs,
        DeploymentConfig,
        RepositoryConfig,
        SentryConfig,
        SlackConfig,
    )
    from mou_deploy.context import ActionContext


class Deployer(Protocol):
    def deploy(
        self,
        credentials: str,
        deployment: DeploymentConfig,
        repository: RepositoryConfig,
    ) -> None: ...


class ReleaseRegistrar(Protocol):
    def register_release(
        self, sentry: SentryConfig, app: str, version: str, environment: str
    ) -> None: ...


class Notifier(Protocol):
    async def notify_success(
        self, slack: SlackConfig, environment: str, app: str, app_url: str
    ) -> None: ...

    async def notify_failure(
        self, slack: SlackConfig, error: BaseException, environment: str, app: str
    ) -> None: ...


def resolve_version(config: ActionConfig, sha: str) -> str:
    """Pick the release version.

    Order: explicit ``version`` input, then ``values.image.tag``, then
    the commit sha of the run.
    """
    return config.version or config.deployment.image_tag or sha


class DeploymentOrchestrator:
    """Runs the deploy, notify and register stages for a validated config."""

    def __init__(
        self,
        deployer: Deployer,
        registrar: ReleaseRegistrar,
        notifier: Notifier,
        console: CLIConsole,
        sha: str,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            deployer: Chart deployer
            registrar: Error-tracking release registrar
            notifier: Chat notifier
            console: Console for progress output
            sha: Commit sha of the run, the last-resort release version
        """
        self.deployer = deployer
        self.registrar = registrar
        self.notifier = notifier
        self.console = console
        self.sha = sha

    async def run(self, config: ActionConfig) -> None:
        """Run every configured stage.

        Raises:
            DeploymentError: If the deployment failed (after notifying)
            ReleaseRegistrationError: If a Sentry stage failed
            NotificationError: If Slack rejected a message
        """
        if config.kubernetes and config.should_deploy:
            await self.deploy(config, config.kubernetes)
        else:
            self.console.warn(
                "No kubernetes config was provided. Skipping kubernetes helm deployment"
            )

        if config.sentry:
            version = resolve_version(config, self.sha)
            self.registrar.register_release(
                config.sentry, config.deployment.app, version, config.environment
            )
        else:
            self.console.warn("No sentry config was provided. Skipping sentry release")

    async def deploy(self, config: ActionConfig, credentials: str) -> None:
        deployment = config.deployment

        try:
            self.deployer.deploy(credentials, deployment, config.repository)
        except Exception as error:
            if config.slack:
                await self.notifier.notify_failure(
                    config.slack, error, config.environment, deployment.app
                )
            raise

        if config.slack:
            await self.notifier.notify_success(
                config.slack, config.environment, deployment.app, deployment.app_url
            )


def log_loaded_variables(config: ActionConfig) -> None:
    """Log the validated inputs at debug level, secrets masked."""
    deployment = config.deployment
    logger.debug("Loaded variables:")
    logger.debug(f"- app: {deployment.app}")
    logger.debug(f"- appUrl: {deployment.app_url}")
    logger.debug(f"- environment: {config.environment}")
    logger.debug(f"- namespace: {deployment.namespace}")
    logger.debug(f"- release: {deployment.release}")
    logger.debug(f"- valueFiles: {deployment.value_files}")
    logger.debug(f"- values: {deployment.values}")
    logger.debug(f"- kubernetes: {'provided' if config.kubernetes else 'missing'}")
    logger.debug(f"- helm: {config.repository.model_dump(exclude={'password'})}")
    logger.debug(f"- sentry: {config.sentry.org if config.sentry else None}")
    logger.debug(f"- slack: {config.slack.channel if config.slack else None}")


def build_orchestrator(
    context: ActionContext, token: str, http: httpx.AsyncClient | None = None
) -> DeploymentOrchestrator:
    """Wire the production stages from a run context.

    Args:
        context: Runtime dependencies
        token: GitHub API token
        http: Optional shared HTTP client for GitHub and Slack calls
    """
    github = GitHubClient(token, api_url=context.github.api_url, client=http)
    return DeploymentOrchestrator(
        deployer=HelmDeployer(context.commands, context.console, context.constants),
        registrar=SentryReleaseRegistrar(context.commands, context.console),
        notifier=SlackNotifier(
            github, context.github, context.console, context.constants, http
        ),
        console=context.console,
        sha=context.github.sha,
    )


async def run_action(inputs: ActionInputs, context: ActionContext) -> None:
    """Validate the inputs and run the deployment.

    Raises:
        ActionError: On any parse, validation or stage failure
    """
    config = validate_inputs(inputs)
    log_loaded_variables(config)

    async with httpx.AsyncClient() as http:
        orchestrator = build_orchestrator(context, config.token, http)
        await orchestrator.run(config)
