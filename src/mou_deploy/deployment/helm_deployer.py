"""Kubernetes deployment using Helm.

This module provides the HelmDeployer class which installs or upgrades a
chart release. A deployment runs these steps in strict order:

1. Write the cluster credentials to the kubeconfig file
2. Log the current state of the namespace (best-effort)
3. Render the inline values to a values file
4. Add and refresh the chart repository, when one is configured
5. Run ``helm upgrade --install``

A failing step raises DeploymentError and the remaining steps are skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from loguru import logger

from mou_deploy.constants import DeploymentConstants
from mou_deploy.errors import DeploymentError
from mou_deploy.shell_commands import CommandResult, render_command

if TYPE_CHECKING:
    from mou_deploy.console import CLIConsole
    from mou_deploy.config.models import DeploymentConfig, RepositoryConfig
    from mou_deploy.shell_commands import ShellCommands


def _failure(
    message: str, stage: str, result: CommandResult, command: str
) -> DeploymentError:
    return DeploymentError(
        message,
        details=f"$ {command}\n{result.stderr or result.stdout}".rstrip(),
        stage=stage,
        stderr=result.stderr,
        stdout=result.stdout,
        returncode=result.returncode,
    )


class HelmDeployer:
    """Deploys a chart release with Helm.

    Attributes:
        commands: Shell command executor
        console: Console for progress output
        constants: Paths of the transient kubeconfig and values files
    """

    def __init__(
        self,
        commands: ShellCommands,
        console: CLIConsole,
        constants: DeploymentConstants | None = None,
    ) -> None:
        """Initialize the deployer.

        Args:
            commands: Shell command executor
            console: Console for progress output
            constants: Optional deployment constants
        """
        self.commands = commands
        self.console = console
        self.constants = constants or DeploymentConstants()

    def deploy(
        self,
        credentials: str,
        deployment: DeploymentConfig,
        repository: RepositoryConfig,
    ) -> None:
        """Install or upgrade the release described by ``deployment``.

        Args:
            credentials: Kubeconfig text, written verbatim
            deployment: Validated deployment config
            repository: Chart repository config (may be empty)

        Raises:
            DeploymentError: If the repository or release step fails
        """
        kubeconfig = self.write_kubeconfig(credentials)
        self.log_namespace_state(deployment.namespace, kubeconfig)

        values_file = self.write_values_file(deployment.values)
        value_files: list[str | Path] = [*deployment.value_files, values_file]

        if repository.is_configured:
            self.add_repository(repository)
        else:
            self.console.info("No repo was provided. Skipping repo addition")

        self.install_release(deployment, value_files, kubeconfig)

    # =========================================================================
    # Steps
    # =========================================================================

    def write_kubeconfig(self, credentials: str) -> Path:
        """Persist the cluster credentials and return their path."""
        path = self.constants.KUBECONFIG_PATH
        path.write_text(credentials)
        self.console.info(f"Created kubernetes config in {path}")
        return path

    def log_namespace_state(self, namespace: str, kubeconfig: Path) -> None:
        """Print releases and resources of the target namespace.

        Purely informational: a failing query is reported and ignored.
        """
        helm, kubectl = self.commands.helm, self.commands.kubectl
        queries = (
            (
                helm.list_releases_cmd(namespace, kubeconfig=kubeconfig),
                lambda: helm.list_releases(namespace, kubeconfig=kubeconfig),
            ),
            (
                kubectl.get_all_cmd(namespace, kubeconfig=kubeconfig),
                lambda: kubectl.get_all(namespace, kubeconfig=kubeconfig),
            ),
        )

        with self.console.group("Configured namespace information"):
            for cmd, query in queries:
                result = query()
                if result.success:
                    self.console.output(result.stdout)
                else:
                    self.console.warn(
                        f"Unable to query namespace {namespace} with "
                        f"'{render_command(cmd)}': {result.stderr.strip()}"
                    )

    def write_values_file(self, values: dict[Any, Any]) -> Path:
        """Render inline values to the values file and return its path.

        Dumped as YAML so values decoded from YAML input (dates, timestamps)
        are written back in a form Helm reads.
        """
        path = self.constants.VALUES_PATH
        logger.debug(f"Parsing values '{values}'...")
        path.write_text(yaml.safe_dump(values, default_flow_style=False))
        self.console.info(f"Created values file from provided values in {path}")
        return path

    def add_repository(self, repository: RepositoryConfig) -> None:
        """Register the chart repository and refresh repository indices.

        Raises:
            DeploymentError: If adding or updating fails
        """
        name, url = repository.name or "", repository.url or ""
        helm = self.commands.helm

        with self.console.group("Add helm repository"):
            rendered = render_command(
                helm.repo_add_cmd(
                    name,
                    url,
                    username=repository.username,
                    password=repository.password,
                ),
                secrets=[repository.password],
            )
            self.console.info(rendered)
            result = helm.repo_add(
                name,
                url,
                username=repository.username,
                password=repository.password,
            )
            if not result.success:
                raise _failure(
                    f"Unable to add repository {name} with url {url}",
                    "repo-add",
                    result,
                    rendered,
                )
            self.console.output(result.stdout)

            rendered = render_command(helm.repo_update_cmd())
            self.console.info(rendered)
            result = helm.repo_update()
            if not result.success:
                raise _failure(
                    "Unable to update repositories", "repo-update", result, rendered
                )
            self.console.output(result.stdout)

    def install_release(
        self,
        deployment: DeploymentConfig,
        value_files: list[str | Path],
        kubeconfig: Path,
    ) -> None:
        """Run ``helm upgrade --install`` for the release.

        Raises:
            DeploymentError: If Helm exits with a non-zero status
        """
        chart, release = deployment.chart, deployment.release
        options: dict[str, Any] = {
            "value_files": value_files,
            "chart_version": deployment.chart_version,
            "kubeconfig": kubeconfig,
        }

        with self.console.group(f"Deploy {chart} chart with release {release}"):
            rendered = render_command(
                self.commands.helm.upgrade_install_cmd(
                    release, chart, deployment.namespace, **options
                )
            )
            self.console.info(rendered)
            result = self.commands.helm.upgrade_install(
                release, chart, deployment.namespace, **options
            )
            if not result.success:
                raise _failure(
                    f"Unable to deploy {chart} chart with release {release}",
                    "install",
                    result,
                    rendered,
                )
            self.console.output(result.stdout)
            self.console.ok(f"Deployed {chart} chart with release {release}")
