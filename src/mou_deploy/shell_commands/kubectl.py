"""Kubectl command abstractions."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .types import CommandResult

if TYPE_CHECKING:
    from .runner import CommandRunner


class KubectlCommands:
    """Kubectl-related shell commands.

    Only read-only queries are needed; resources are changed through Helm.
    """

    def __init__(self, runner: CommandRunner, binary: str = "kubectl") -> None:
        """Initialize kubectl commands.

        Args:
            runner: Command runner for executing shell commands
            binary: kubectl executable name or path
        """
        self._runner = runner
        self._binary = binary

    def get_all_cmd(
        self, namespace: str, *, kubeconfig: Path | None = None
    ) -> list[str]:
        """Build the ``kubectl get all`` command."""
        cmd = [self._binary, "get", "all", "-n", namespace]
        if kubeconfig is not None:
            cmd.extend(["--kubeconfig", str(kubeconfig)])
        return cmd

    def get_all(
        self, namespace: str, *, kubeconfig: Path | None = None
    ) -> CommandResult:
        """List every workload resource in a namespace."""
        return self._runner.run(self.get_all_cmd(namespace, kubeconfig=kubeconfig))
