"""Helm command abstractions.

This module provides commands for Helm repository management, release
deployment and release listing.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from .types import CommandResult

if TYPE_CHECKING:
    from .runner import CommandRunner


class HelmCommands:
    """Helm-related shell commands.

    Provides operations for:
    - Repository management (add, update)
    - Release management (upgrade --install)
    - Status queries (list releases)

    Builders (``*_cmd``) return the argument list without running it so
    command composition can be checked on its own.
    """

    def __init__(self, runner: CommandRunner, binary: str = "helm") -> None:
        """Initialize Helm commands.

        Args:
            runner: Command runner for executing shell commands
            binary: Helm executable name or path
        """
        self._runner = runner
        self._binary = binary

    # =========================================================================
    # Repository Management
    # =========================================================================

    def repo_add_cmd(
        self,
        name: str,
        url: str,
        *,
        username: str | None = None,
        password: str | None = None,
    ) -> list[str]:
        """Build the ``helm repo add`` command.

        Credentials are only included when both username and password
        are given.
        """
        cmd = [self._binary, "repo", "add"]
        if username and password:
            cmd.extend(["--username", username, "--password", password])
        cmd.extend([name, url])
        return cmd

    def repo_add(
        self,
        name: str,
        url: str,
        *,
        username: str | None = None,
        password: str | None = None,
    ) -> CommandResult:
        """Register a chart repository.

        Args:
            name: Local name for the repository
            url: Repository URL
            username: Optional basic-auth username
            password: Optional basic-auth password

        Returns:
            CommandResult with the add status
        """
        return self._runner.run(
            self.repo_add_cmd(name, url, username=username, password=password)
        )

    def repo_update_cmd(self) -> list[str]:
        """Build the ``helm repo update`` command."""
        return [self._binary, "repo", "update"]

    def repo_update(self) -> CommandResult:
        """Refresh the local index of every registered repository."""
        return self._runner.run(self.repo_update_cmd())

    # =========================================================================
    # Release Management
    # =========================================================================

    def upgrade_install_cmd(
        self,
        release_name: str,
        chart: str,
        namespace: str,
        *,
        value_files: Sequence[str | Path] | None = None,
        chart_version: str | None = None,
        kubeconfig: Path | None = None,
        wait: bool = True,
    ) -> list[str]:
        """Build the ``helm upgrade --install`` command.

        Value files are passed as separate ``-f`` flags in the given order,
        so later files override earlier ones.

        Example:
            >>> helm.upgrade_install_cmd(
            ...     "my-release", "repo/my-chart", "staging",
            ...     value_files=["values.yaml"], chart_version="1.0.0",
            ... )
            ['helm', 'upgrade', '--install', '--wait', '--namespace', 'staging',
             '-f', 'values.yaml', '--version', '1.0.0', 'my-release', 'repo/my-chart']
        """
        cmd = [self._binary, "upgrade", "--install"]
        if wait:
            cmd.append("--wait")
        if kubeconfig is not None:
            cmd.extend(["--kubeconfig", str(kubeconfig)])
        cmd.extend(["--namespace", namespace])

        for vf in value_files or []:
            cmd.extend(["-f", str(vf)])

        if chart_version:
            cmd.extend(["--version", chart_version])

        cmd.extend([release_name, chart])
        return cmd

    def upgrade_install(
        self,
        release_name: str,
        chart: str,
        namespace: str,
        *,
        value_files: Sequence[str | Path] | None = None,
        chart_version: str | None = None,
        kubeconfig: Path | None = None,
        wait: bool = True,
    ) -> CommandResult:
        """Deploy or upgrade a Helm release.

        Uses ``helm upgrade --install`` to idempotently deploy a chart.

        Args:
            release_name: Name for the Helm release
            chart: Chart reference (``repo/chart`` or a path)
            namespace: Kubernetes namespace for deployment
            value_files: Ordered list of values files
            chart_version: Optional chart version constraint
            kubeconfig: Credential file for the target cluster
            wait: Whether to wait for resources to be ready

        Returns:
            CommandResult with deployment status
        """
        return self._runner.run(
            self.upgrade_install_cmd(
                release_name,
                chart,
                namespace,
                value_files=value_files,
                chart_version=chart_version,
                kubeconfig=kubeconfig,
                wait=wait,
            )
        )

    # =========================================================================
    # Status Queries
    # =========================================================================

    def list_releases_cmd(
        self, namespace: str, *, kubeconfig: Path | None = None
    ) -> list[str]:
        """Build the ``helm ls`` command."""
        cmd = [self._binary, "ls", "-n", namespace]
        if kubeconfig is not None:
            cmd.extend(["--kubeconfig", str(kubeconfig)])
        return cmd

    def list_releases(
        self, namespace: str, *, kubeconfig: Path | None = None
    ) -> CommandResult:
        """List releases in a namespace as Helm's human-readable table."""
        return self._runner.run(
            self.list_releases_cmd(namespace, kubeconfig=kubeconfig)
        )
