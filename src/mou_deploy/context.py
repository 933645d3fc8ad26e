"""Run context and dependency container."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from mou_deploy.console import CLIConsole, console
from mou_deploy.constants import DeploymentConstants
from mou_deploy.shell_commands import ShellCommands


@dataclass(frozen=True)
class GitHubContext:
    """Workflow run information provided by the GitHub Actions runner.

    Attributes:
        owner: Repository owner
        repo: Repository name
        sha: Commit that triggered the run
        ref: Ref that triggered the run
        server_url: GitHub web URL
        api_url: GitHub REST API URL
        payload: Webhook event payload of the triggering event
    """

    owner: str
    repo: str
    sha: str
    ref: str = ""
    server_url: str = DeploymentConstants.GITHUB_SERVER_URL
    api_url: str = DeploymentConstants.GITHUB_API_URL
    payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GitHubContext:
        """Build the context from the runner's environment variables."""
        env = os.environ if environ is None else environ
        owner, _, repo = env.get("GITHUB_REPOSITORY", "").partition("/")

        payload: dict[str, Any] = {}
        event_path = env.get("GITHUB_EVENT_PATH")
        if event_path and Path(event_path).is_file():
            payload = json.loads(Path(event_path).read_text())
        elif event_path:
            logger.warning(f"GITHUB_EVENT_PATH {event_path} does not exist")

        return cls(
            owner=owner,
            repo=repo,
            sha=env.get("GITHUB_SHA", ""),
            ref=env.get("GITHUB_REF", ""),
            server_url=env.get("GITHUB_SERVER_URL", DeploymentConstants.GITHUB_SERVER_URL),
            api_url=env.get("GITHUB_API_URL", DeploymentConstants.GITHUB_API_URL),
            payload=payload,
        )

    @property
    def deployment(self) -> dict[str, Any]:
        """The ``deployment`` object of a deployment event, if any."""
        return self.payload.get("deployment") or {}

    @property
    def repository_url(self) -> str:
        """Web URL of the repository."""
        repository = self.payload.get("repository") or {}
        if repository.get("html_url"):
            return str(repository["html_url"])
        return f"{self.server_url}/{self.owner}/{self.repo}"


@dataclass(frozen=True)
class ActionContext:
    """Runtime dependencies of a run."""

    console: CLIConsole
    commands: ShellCommands
    constants: DeploymentConstants
    github: GitHubContext


def build_action_context() -> ActionContext:
    """Build a fresh ActionContext from the current environment."""
    constants = DeploymentConstants()
    return ActionContext(
        console=console,
        commands=ShellCommands(constants=constants),
        constants=constants,
        github=GitHubContext.from_env(),
    )
