"""Deployment constants and configuration.

This module centralizes the fixed paths, binaries and endpoints used
throughout a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DeploymentConstants:
    """Constants for a single action run.

    All attributes are class-level and immutable. Both files are
    overwritten on each run and left in place afterwards.
    """

    # Transient files, relative to the working directory
    KUBECONFIG_PATH: Path = Path("./kubeconfig.yaml")
    VALUES_PATH: Path = Path("./loaded-values.yaml")

    # Deployment defaults
    DEFAULT_NAMESPACE: str = "default"

    # External binaries
    HELM_BIN: str = "helm"
    KUBECTL_BIN: str = "kubectl"
    SENTRY_CLI_BIN: str = "sentry-cli"

    # HTTP endpoints
    SLACK_API_URL: str = "https://slack.com/api"
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_SERVER_URL: str = "https://github.com"

    # Environment that gets the rocket in notifications
    PRODUCTION_ENVIRONMENT: str = "production"
