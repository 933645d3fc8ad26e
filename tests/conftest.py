import io
import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

# Keep workflow commands out of test output unless a test opts in
os.environ.pop("GITHUB_ACTIONS", None)

from mou_deploy.console import CLIConsole  # noqa: E402
from mou_deploy.constants import DeploymentConstants  # noqa: E402
from mou_deploy.shell_commands import ShellCommands  # noqa: E402
from tests.helpers import ok  # noqa: E402


@pytest.fixture
def console_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(console_output: io.StringIO) -> CLIConsole:
    """Console writing to an in-memory buffer."""
    return CLIConsole(
        Console(file=console_output, width=500, color_system=None),
        workflow_commands=False,
    )


@pytest.fixture
def constants(tmp_path: Path) -> DeploymentConstants:
    """Constants pointing the transient files into a temporary directory."""
    return DeploymentConstants(
        KUBECONFIG_PATH=tmp_path / "kubeconfig.yaml",
        VALUES_PATH=tmp_path / "loaded-values.yaml",
    )


@pytest.fixture
def mock_runner() -> MagicMock:
    """Command runner whose commands all succeed."""
    runner = MagicMock()
    runner.run.return_value = ok()
    return runner


@pytest.fixture
def commands(mock_runner: MagicMock, constants: DeploymentConstants) -> ShellCommands:
    return ShellCommands(constants=constants, runner=mock_runner)

