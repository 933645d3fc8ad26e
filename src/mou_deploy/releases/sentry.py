"""Sentry release registration.

A release is registered in three sentry-cli calls: create the release,
attach the repository's commits, then record a deploy for the
environment. Stages that already succeeded are not undone when a later
one fails.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from mou_deploy.errors import ReleaseRegistrationError
from mou_deploy.shell_commands import CommandResult, render_command

if TYPE_CHECKING:
    from mou_deploy.console import CLIConsole
    from mou_deploy.config.models import SentryConfig
    from mou_deploy.shell_commands import ShellCommands


class SentryReleaseRegistrar:
    """Registers application releases in Sentry through sentry-cli."""

    def __init__(self, commands: ShellCommands, console: CLIConsole) -> None:
        """Initialize the registrar.

        Args:
            commands: Shell command executor
            console: Console for progress output
        """
        self.commands = commands
        self.console = console

    def register_release(
        self,
        sentry: SentryConfig,
        app: str,
        version: str,
        environment: str,
    ) -> None:
        """Create a release, attach commits and mark it deployed.

        Args:
            sentry: Sentry credentials and organization
            app: Sentry project slug (the application name)
            version: Release version
            environment: Environment the release was deployed to

        Raises:
            ReleaseRegistrationError: Naming the stage that failed
        """
        cli = self.commands.sentry
        token, org = sentry.auth_token, sentry.org
        self.console.info(f"Set up sentry release for {environment}")

        self._run_stage(
            "create",
            cli.new_release_cmd(token, org, app, version),
            lambda: cli.new_release(token, org, app, version),
            f"Unable to prepare {app} sentry release",
            token,
        )
        self._run_stage(
            "set-commits",
            cli.set_commits_cmd(token, org, version),
            lambda: cli.set_commits(token, org, version),
            f"Unable set commits for {app} sentry release",
            token,
        )
        self._run_stage(
            "deploy",
            cli.new_deploy_cmd(token, org, version, environment),
            lambda: cli.new_deploy(token, org, version, environment),
            f"Unable to deploy {app} to sentry",
            token,
        )
        self.console.ok(f"Registered {app} release {version} in sentry")

    def _run_stage(
        self,
        stage: str,
        cmd: list[str],
        execute: Callable[[], CommandResult],
        message: str,
        token: str,
    ) -> None:
        rendered = render_command(cmd, secrets=[token])
        self.console.info(rendered)
        result = execute()
        if not result.success:
            raise ReleaseRegistrationError(
                message,
                details=f"$ {rendered}\n{result.stderr or result.stdout}".rstrip(),
                stage=stage,
            )
