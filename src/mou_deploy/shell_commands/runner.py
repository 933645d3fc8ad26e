"""Subprocess execution shared by the helm, kubectl and sentry-cli wrappers.

The runner never raises for a failing command; callers inspect the
returned CommandResult and decide which failures abort a run.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Iterable, Sequence
from pathlib import Path

from .types import CommandResult

MASK = "***"


def render_command(cmd: Sequence[str], *, secrets: Iterable[str | None] = ()) -> str:
    """Render a command for logging, masking any secret arguments.

    Args:
        cmd: Command and arguments
        secrets: Values that must not appear in clear text

    Returns:
        Shell-quoted command line
    """
    hidden = {s for s in secrets if s}
    return shlex.join(MASK if arg in hidden else arg for arg in cmd)


class CommandRunner:
    """Low-level command executor with consistent result handling.

    Commands are always passed as argument lists and never go through a
    shell, so values taken from configuration are never re-parsed.
    """

    def __init__(self, working_dir: Path | None = None) -> None:
        """Initialize the command runner.

        Args:
            working_dir: Directory commands run from (defaults to the
                         current working directory)
        """
        self.working_dir = working_dir

    def run(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        capture_output: bool = True,
    ) -> CommandResult:
        """Execute a command and return a structured result.

        Blocks until the command exits; no timeout is applied.

        Args:
            cmd: Command and arguments as a sequence
            cwd: Working directory (defaults to working_dir)
            capture_output: Whether to capture stdout/stderr

        Returns:
            CommandResult with success status, output, and return code
        """
        try:
            result = subprocess.run(
                list(cmd),
                cwd=cwd or self.working_dir,
                capture_output=capture_output,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            # Missing binary behaves like a failed command
            return CommandResult(
                success=False,
                stderr=str(e),
                returncode=127,
            )
        return CommandResult(
            success=result.returncode == 0,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            returncode=result.returncode,
        )
