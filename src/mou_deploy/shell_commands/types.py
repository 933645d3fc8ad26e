"""Data types for shell command results."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CommandResult"]


@dataclass
class CommandResult:
    """Result of a command execution.

    Attributes:
        success: Whether the command exited with status 0
        stdout: Captured standard output
        stderr: Captured standard error
        returncode: Process exit status
    """

    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0
