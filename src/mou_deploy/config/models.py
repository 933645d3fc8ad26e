"""Typed configuration models.

Models are built from mappings that already passed the validator in
``validator.py``; the validator owns the user-facing error messages.
Keys use the camelCase spelling of the action inputs.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _InputModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class DeploymentConfig(_InputModel):
    """Helm deployment settings from the ``config`` input."""

    app: str
    app_url: str = Field(alias="appUrl")
    chart: str
    chart_version: str | None = Field(default=None, alias="chartVersion")
    namespace: str = "default"
    release: str
    value_files: list[str] = Field(default_factory=list, alias="valueFiles")
    values: dict[Any, Any] = Field(default_factory=dict)

    @property
    def image_tag(self) -> str | None:
        """Image tag from ``values.image.tag`` if one is set."""
        image = self.values.get("image")
        if isinstance(image, dict) and image.get("tag"):
            return str(image["tag"])
        return None


class RepositoryConfig(_InputModel):
    """Chart repository from the ``helm`` input."""

    name: str | None = None
    url: str | None = None
    username: str | None = None
    password: str | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self.name and self.url)

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)


class SentryConfig(_InputModel):
    """Sentry credentials from the ``sentry`` input."""

    auth_token: str = Field(alias="authToken")
    org: str


class SlackConfig(_InputModel):
    """Slack bot settings from the ``slack`` input."""

    token: str
    channel: str


class ActionInputs(BaseModel):
    """Raw text inputs of a run, as received from the workflow."""

    config: str
    environment: str
    token: str
    kubernetes: str | None = None
    helm: str | None = None
    sentry: str | None = None
    slack: str | None = None
    version: str | None = None


class ActionConfig(BaseModel):
    """Validated inputs of a run."""

    model_config = ConfigDict(frozen=True)

    deployment: DeploymentConfig
    environment: str
    token: str
    kubernetes: str | None = None
    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    sentry: SentryConfig | None = None
    slack: SlackConfig | None = None
    version: str | None = None

    @property
    def should_deploy(self) -> bool:
        """Deploy only when both a chart and cluster credentials exist."""
        return bool(self.deployment.chart and self.kubernetes)
