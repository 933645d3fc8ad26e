"""Shared test data and command result builders."""

from unittest.mock import MagicMock

from mou_deploy.shell_commands import CommandResult

CONFIG_FIXTURE = {
    "app": "myApp",
    "appUrl": "https://myapp.mydomain.localhost",
    "chart": "minddocdev/myapp",
    "cluster": "my-cluster",
    "domain": "mydomain.localhost",
    "namespace": "my-namespace",
    "release": "my-release",
    "values": {"image": {"repositoryName": "my-repo", "tag": "mytag"}},
    "valueFiles": ["helm/values/myapp.yaml"],
}


def ok(stdout: str = "stdout") -> CommandResult:
    return CommandResult(success=True, stdout=stdout, stderr="", returncode=0)


def failed(stderr: str = "command failed", returncode: int = 1) -> CommandResult:
    return CommandResult(
        success=False, stdout="partial output", stderr=stderr, returncode=returncode
    )


def executed(mock_runner: MagicMock) -> list[list[str]]:
    """Commands passed to the runner, in call order."""
    return [list(c.args[0]) for c in mock_runner.run.call_args_list]
