"""Tests for Helm repository, install and listing commands."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from mou_deploy.shell_commands.helm import HelmCommands
from mou_deploy.shell_commands.types import CommandResult


class TestHelmRepository:
    """Tests for helm repo add / update."""

    @pytest.fixture
    def helm_commands(self, mock_runner: MagicMock) -> HelmCommands:
        """Create HelmCommands instance with mock runner."""
        return HelmCommands(mock_runner)

    def test_repo_add_without_credentials(
        self, helm_commands: HelmCommands, mock_runner: MagicMock
    ) -> None:
        """Repo add without credentials should only pass name and url."""
        helm_commands.repo_add("minddocdev", "https://charts.example.com")

        mock_runner.run.assert_called_once()
        cmd = mock_runner.run.call_args[0][0]
        assert cmd == ["helm", "repo", "add", "minddocdev", "https://charts.example.com"]

    def test_repo_add_with_credentials(
        self, helm_commands: HelmCommands, mock_runner: MagicMock
    ) -> None:
        """Credentials should come before the positional arguments."""
        helm_commands.repo_add(
            "minddocdev", "https://charts.example.com", username="user", password="pw"
        )

        cmd = mock_runner.run.call_args[0][0]
        assert cmd == [
            "helm",
            "repo",
            "add",
            "--username",
            "user",
            "--password",
            "pw",
            "minddocdev",
            "https://charts.example.com",
        ]

    @pytest.mark.parametrize(
        ("username", "password"), [("user", None), (None, "pw"), ("", "pw")]
    )
    def test_repo_add_ignores_partial_credentials(
        self, helm_commands: HelmCommands, username: str | None, password: str | None
    ) -> None:
        """Credentials are only passed when both are set."""
        cmd = helm_commands.repo_add_cmd(
            "repo", "https://repo", username=username, password=password
        )

        assert "--username" not in cmd
        assert "--password" not in cmd

    def test_repo_update(
        self, helm_commands: HelmCommands, mock_runner: MagicMock
    ) -> None:
        """Repo update should refresh every repository."""
        result = helm_commands.repo_update()

        assert result.success
        assert mock_runner.run.call_args[0][0] == ["helm", "repo", "update"]


class TestHelmUpgradeInstall:
    """Tests for helm upgrade --install."""

    @pytest.fixture
    def helm_commands(self, mock_runner: MagicMock) -> HelmCommands:
        """Create HelmCommands instance with mock runner."""
        return HelmCommands(mock_runner)

    def test_full_command(
        self, helm_commands: HelmCommands, mock_runner: MagicMock
    ) -> None:
        """Every option should appear in a fixed order."""
        mock_runner.run.return_value = CommandResult(
            success=True, stdout="Release upgraded", stderr="", returncode=0
        )

        result = helm_commands.upgrade_install(
            "my-release",
            "minddocdev/myapp",
            "my-namespace",
            value_files=["myFile1", Path("values.yaml")],
            chart_version="1.2.3",
            kubeconfig=Path("kubeconfig.yaml"),
        )

        assert result.success
        cmd = mock_runner.run.call_args[0][0]
        assert cmd == [
            "helm",
            "upgrade",
            "--install",
            "--wait",
            "--kubeconfig",
            "kubeconfig.yaml",
            "--namespace",
            "my-namespace",
            "-f",
            "myFile1",
            "-f",
            "values.yaml",
            "--version",
            "1.2.3",
            "my-release",
            "minddocdev/myapp",
        ]

    def test_minimal_command(self, helm_commands: HelmCommands) -> None:
        """Optional flags should be left out when not given."""
        cmd = helm_commands.upgrade_install_cmd(
            "my-release", "minddocdev/myapp", "default", wait=False
        )

        assert cmd == [
            "helm",
            "upgrade",
            "--install",
            "--namespace",
            "default",
            "my-release",
            "minddocdev/myapp",
        ]

    def test_value_file_order_is_kept(self, helm_commands: HelmCommands) -> None:
        """Later value files must follow earlier ones."""
        cmd = helm_commands.upgrade_install_cmd(
            "r", "c", "ns", value_files=["a.yaml", "b.yaml", "c.yaml"]
        )

        files = [cmd[i + 1] for i, arg in enumerate(cmd) if arg == "-f"]
        assert files == ["a.yaml", "b.yaml", "c.yaml"]

    def test_custom_binary(self, mock_runner: MagicMock) -> None:
        """A configured binary path replaces the helm executable."""
        helm = HelmCommands(mock_runner, binary="/usr/local/bin/helm")

        assert helm.repo_update_cmd()[0] == "/usr/local/bin/helm"


class TestHelmListReleases:
    """Tests for helm ls."""

    def test_list_releases(self, mock_runner: MagicMock) -> None:
        """Listing should target the namespace and kubeconfig."""
        HelmCommands(mock_runner).list_releases(
            "my-namespace", kubeconfig=Path("kubeconfig.yaml")
        )

        cmd = mock_runner.run.call_args[0][0]
        assert cmd == [
            "helm",
            "ls",
            "-n",
            "my-namespace",
            "--kubeconfig",
            "kubeconfig.yaml",
        ]
