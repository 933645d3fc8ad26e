"""Slack Block Kit message builders for deployment notifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

Block = dict[str, Any]

DIVIDER: Block = {"type": "divider"}

# Slack rejects section texts above 3000 characters
OUTPUT_TAIL_CHARS = 1000


@dataclass(frozen=True)
class DeploymentSummary:
    """Everything the shared part of a deployment message shows.

    Attributes:
        app: Application name
        environment: Target environment
        repo: Repository name
        repo_url: Repository web URL
        sha: Deployed commit sha
        ref: Deployed ref (tag, branch or sha)
        ref_url: Link for the ref (release page or commit list)
        description: Release notes or commit message, as mrkdwn
        author_name: Commit author's name
        author_login: Commit author's GitHub login
        author_url: Commit author's profile URL
        avatar_url: Commit author's avatar
        commit_url: Commit web URL
        deployment_id: GitHub deployment id
        is_production: Whether the environment is production
    """

    app: str
    environment: str
    repo: str
    repo_url: str
    sha: str
    ref: str
    ref_url: str
    description: str
    author_name: str
    author_login: str | None
    author_url: str | None
    avatar_url: str | None
    commit_url: str
    deployment_id: str
    is_production: bool = False

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @property
    def display_ref(self) -> str:
        """The ref, shortened when it is the commit sha itself."""
        if self.ref == self.sha:
            return f"{self.ref[:7]}..."
        return self.ref


def _mrkdwn(text: str) -> Block:
    return {"type": "mrkdwn", "text": text}


def _tail(text: str | None) -> str:
    if not text:
        return ""
    return text if len(text) <= OUTPUT_TAIL_CHARS else "..." + text[-OUTPUT_TAIL_CHARS:]


def build_deployment_message(action_message: str, summary: DeploymentSummary) -> list[Block]:
    """Build the headline, description and metadata blocks."""
    emoji = ":rocket:" if summary.is_production else ":shipit:"
    repo_url = summary.repo_url
    headline = (
        f"{action_message} "
        f"*<{repo_url}/commit/{summary.sha}/checks|{summary.app}>* "
        f"(<{summary.ref_url}|{summary.display_ref}>) to "
        f"*<{repo_url}/deployments?environment={summary.environment}#activity-log"
        f"|{summary.environment}>* {emoji}"
    )

    if summary.author_login:
        author = f"{summary.author_name} <{summary.author_url}|@{summary.author_login}>"
    else:
        author = summary.author_name

    metadata: Block = {
        "type": "section",
        "fields": [
            _mrkdwn(f":books: *Repository:* <{repo_url}|{summary.repo}>"),
            _mrkdwn(f":person_in_steamy_room: *Author:* {author}"),
            _mrkdwn(f":beer: *Commit:* <{summary.commit_url}|{summary.short_sha}>"),
            _mrkdwn(f":point_left: *Deployment ID:* {summary.deployment_id}"),
        ],
    }
    if summary.avatar_url:
        metadata["accessory"] = {
            "type": "image",
            "image_url": summary.avatar_url,
            "alt_text": "avatar_url",
        }

    return [
        {"type": "section", "text": _mrkdwn(headline)},
        DIVIDER,
        {"type": "section", "text": _mrkdwn(summary.description)},
        DIVIDER,
        metadata,
    ]


def build_success_message(summary: DeploymentSummary, app_url: str) -> list[Block]:
    """Deployment message followed by the application URL footer."""
    host = app_url.split("//", 1)[-1]
    return [
        *build_deployment_message("I have deployed", summary),
        {
            "type": "context",
            "elements": [_mrkdwn(f"*Application url:* <{app_url}|{host}>")],
        },
        DIVIDER,
    ]


def build_failure_message(
    summary: DeploymentSummary,
    message: str,
    *,
    returncode: int | None = None,
    stderr: str | None = None,
    stdout: str | None = None,
) -> list[Block]:
    """Deployment message followed by the error details."""
    status = "unknown" if returncode is None else returncode
    error_text = (
        f"{message} (error code {status})\n\n"
        f"`stderr`: ```{_tail(stderr)}```\n\n"
        f"`stdout`: ```{_tail(stdout)}```"
    )
    return [
        *build_deployment_message("I have FAILED to deploy", summary),
        DIVIDER,
        {"type": "section", "text": _mrkdwn(error_text)},
        DIVIDER,
    ]
