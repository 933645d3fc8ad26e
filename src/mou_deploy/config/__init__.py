"""Configuration parsing, validation and typed models."""

from .models import (
    ActionConfig,
    ActionInputs,
    DeploymentConfig,
    RepositoryConfig,
    SentryConfig,
    SlackConfig,
)
from .parser import parse_config
from .validator import (
    validate_deployment_config,
    validate_inputs,
    validate_repository_config,
    validate_sentry_config,
    validate_slack_config,
)

__all__ = [
    "ActionConfig",
    "ActionInputs",
    "DeploymentConfig",
    "RepositoryConfig",
    "SentryConfig",
    "SlackConfig",
    "parse_config",
    "validate_deployment_config",
    "validate_inputs",
    "validate_repository_config",
    "validate_sentry_config",
    "validate_slack_config",
]
