"""Shell command abstractions for the deployment action.

This package provides a typed interface for the external tools a run
drives. It is organized into specialized modules for each tool:

- helm: Helm repository and release management
- kubectl: Kubernetes resource queries
- sentry_cli: Sentry release management

Every command is composed as an ordered argument list and executed
without a shell.

Usage:
    from mou_deploy.shell_commands import ShellCommands

    commands = ShellCommands()
    result = commands.helm.repo_update()
    if not result.success:
        print(result.stderr)
"""

from pathlib import Path

from mou_deploy.constants import DeploymentConstants

from .helm import HelmCommands
from .kubectl import KubectlCommands
from .runner import CommandRunner, render_command
from .sentry_cli import SentryCliCommands
from .types import CommandResult


class ShellCommands:
    """Unified interface for all shell command operations.

    Attributes:
        helm: Helm-related commands
        kubectl: Kubernetes kubectl commands
        sentry: sentry-cli release commands
    """

    def __init__(
        self,
        working_dir: Path | None = None,
        constants: DeploymentConstants | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        """Initialize the shell commands executor.

        Args:
            working_dir: Directory commands run from (defaults to the
                         current working directory)
            constants: Optional constants overriding binary names
            runner: Optional runner (defaults to a CommandRunner in working_dir)
        """
        constants = constants or DeploymentConstants()
        self._runner = runner or CommandRunner(working_dir)

        self.helm = HelmCommands(self._runner, constants.HELM_BIN)
        self.kubectl = KubectlCommands(self._runner, constants.KUBECTL_BIN)
        self.sentry = SentryCliCommands(self._runner, constants.SENTRY_CLI_BIN)

    @property
    def runner(self) -> CommandRunner:
        """Get the underlying command runner."""
        return self._runner


__all__ = [
    "ShellCommands",
    "CommandResult",
    "CommandRunner",
    "HelmCommands",
    "KubectlCommands",
    "SentryCliCommands",
    "render_command",
]
