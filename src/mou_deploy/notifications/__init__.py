"""Deployment notifications.

- github: commit and release lookups
- slack: message publishing
- messages: Block Kit message builders
- notifier: SlackNotifier tying them together
"""

from .github import GitHubClient
from .messages import DeploymentSummary
from .notifier import SlackNotifier
from .slack import SlackClient

__all__ = ["GitHubClient", "DeploymentSummary", "SlackClient", "SlackNotifier"]
