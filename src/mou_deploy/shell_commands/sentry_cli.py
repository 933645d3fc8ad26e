"""sentry-cli command abstractions.

This module provides the release management subcommands of sentry-cli.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import CommandResult

if TYPE_CHECKING:
    from .runner import CommandRunner


class SentryCliCommands:
    """sentry-cli release commands.

    Provides operations for:
    - Creating a release for a project
    - Associating commits automatically
    - Recording a deploy of a release to an environment
    """

    def __init__(self, runner: CommandRunner, binary: str = "sentry-cli") -> None:
        """Initialize sentry-cli commands.

        Args:
            runner: Command runner for executing shell commands
            binary: sentry-cli executable name or path
        """
        self._runner = runner
        self._binary = binary

    def _releases_cmd(self, auth_token: str, org: str) -> list[str]:
        return [self._binary, "--auth-token", auth_token, "releases", "--org", org]

    def new_release_cmd(
        self, auth_token: str, org: str, project: str, version: str
    ) -> list[str]:
        """Build ``releases new -p PROJECT VERSION``."""
        return [*self._releases_cmd(auth_token, org), "new", "-p", project, version]

    def new_release(
        self, auth_token: str, org: str, project: str, version: str
    ) -> CommandResult:
        """Create a release for a project."""
        return self._runner.run(self.new_release_cmd(auth_token, org, project, version))

    def set_commits_cmd(self, auth_token: str, org: str, version: str) -> list[str]:
        """Build ``releases set-commits --auto VERSION``."""
        return [*self._releases_cmd(auth_token, org), "set-commits", "--auto", version]

    def set_commits(self, auth_token: str, org: str, version: str) -> CommandResult:
        """Attach the commit history of the current repository to a release."""
        return self._runner.run(self.set_commits_cmd(auth_token, org, version))

    def new_deploy_cmd(
        self, auth_token: str, org: str, version: str, environment: str
    ) -> list[str]:
        """Build ``releases deploys VERSION new -e ENVIRONMENT``."""
        return [
            *self._releases_cmd(auth_token, org),
            "deploys",
            version,
            "new",
            "-e",
            environment,
        ]

    def new_deploy(
        self, auth_token: str, org: str, version: str, environment: str
    ) -> CommandResult:
        """Record a deploy of a release to an environment."""
        return self._runner.run(
            self.new_deploy_cmd(auth_token, org, version, environment)
        )
