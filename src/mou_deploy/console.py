"""Console output for the action.

User-facing progress goes through CLIConsole. When running inside a GitHub
Actions job, groups, warnings and failures are also emitted as workflow
commands so the runner folds and annotates them.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger
from rich.console import Console, ConsoleRenderable
from rich.panel import Panel


def running_in_actions() -> bool:
    """Check whether the process runs inside a GitHub Actions job."""
    return os.getenv("GITHUB_ACTIONS") == "true"


def configure_logging(debug: bool = False) -> None:
    """Route loguru diagnostics to stderr.

    Debug records (payloads, API responses) are only shown when ``debug``
    is set, matching the runner's step debug logging.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "INFO",
        format="<level>{level: <8}</level> | {message}",
        colorize=not running_in_actions(),
    )


class CLIConsole:
    """Rich console wrapper for consistent action output."""

    def __init__(
        self, console: Console | None = None, workflow_commands: bool | None = None
    ) -> None:
        """Initialize the console.

        Args:
            console: Rich console to write to (defaults to a new one)
            workflow_commands: Emit GitHub workflow commands; detected from
                               the environment when not given
        """
        self.console = console or Console()
        self.workflow_commands = (
            running_in_actions() if workflow_commands is None else workflow_commands
        )

    def print(self, msg: ConsoleRenderable | str | None = None) -> None:
        self.console.print(msg)

    def _command(self, line: str) -> None:
        self.console.print(line, markup=False, highlight=False, soft_wrap=True)

    def info(self, msg: str) -> None:
        self.console.print(f"[cyan]ℹ[/cyan]  {msg}")

    def ok(self, msg: str) -> None:
        self.console.print(f"[green]✅[/green] {msg}")

    def error(self, msg: str) -> None:
        self.console.print(f"[red]❌[/red] {msg}")

    def warn(self, msg: str) -> None:
        if self.workflow_commands:
            self._command(f"::warning::{msg}")
            return
        self.console.print(f"[yellow]⚠️[/yellow]  {msg}")

    def output(self, text: str) -> None:
        """Print captured command output verbatim."""
        if text:
            self.console.print(text.rstrip("\n"), markup=False, highlight=False)

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        """Group the output produced inside the block under a title."""
        if self.workflow_commands:
            self._command(f"::group::{title}")
        else:
            self.console.print(f"\n[bold underline]{title}[/bold underline]")
        try:
            yield
        finally:
            if self.workflow_commands:
                self._command("::endgroup::")

    def set_failed(
        self, message: str, details: str | None = None, exit_code: int = 1
    ) -> None:
        """Mark the run as failed and exit.

        Args:
            message: One-line failure message
            details: Optional additional details
            exit_code: Exit code to use
        """
        if self.workflow_commands:
            self._command(f"::error::{message}")
        self.error(f"[bold red]{message}[/bold red]")
        if details:
            self.console.print(Panel(details, title="Details", border_style="red"))
        raise typer.Exit(exit_code)


def with_error_handling(func: Callable[..., None]) -> Callable[..., None]:
    """Decorator turning any failure of a command into a failed run.

    Every exception ends the run with exit code 1 and its message;
    an interrupt exits with 130.

    Args:
        func: The command function to wrap

    Returns:
        Wrapped function with error handling
    """
    from mou_deploy.errors import ActionError

    @wraps(func)
    def wrapper(*args: object, **kwargs: object) -> None:
        try:
            func(*args, **kwargs)
        except typer.Exit:
            raise
        except KeyboardInterrupt:
            console.print("\n[dim]Operation cancelled by user.[/dim]")
            raise typer.Exit(130) from None
        except ActionError as e:
            console.set_failed(e.message, e.details)
        except Exception as e:
            console.set_failed(str(e) or e.__class__.__name__)

    return wrapper


# Shared console instance for consistent output
console = CLIConsole()
