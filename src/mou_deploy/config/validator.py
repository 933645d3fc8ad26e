"""Validation of parsed configuration inputs.

Each configuration group has a fixed list of mandatory string keys and,
where applicable, optional keys with a declared type. Checks run in
declaration order and the first failure is raised, naming the key.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger

from mou_deploy.constants import DeploymentConstants
from mou_deploy.errors import ValidationError

from .models import (
    ActionConfig,
    ActionInputs,
    DeploymentConfig,
    RepositoryConfig,
    SentryConfig,
    SlackConfig,
)
from .parser import parse_config

DEPLOYMENT_REQUIRED_KEYS = ("app", "appUrl", "chart")
DEPLOYMENT_OPTIONAL_STRING_KEYS = ("namespace", "release")
SENTRY_REQUIRED_KEYS = ("authToken", "org")
SLACK_REQUIRED_KEYS = ("token", "channel")
REPOSITORY_KEYS = ("name", "url", "username", "password")


def _display(value: Any) -> str:
    return "None" if value is None else str(value)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def require_strings(config: Mapping[str, Any], keys: Sequence[str]) -> None:
    """Check that every key holds a non-empty string.

    Raises:
        ValidationError: Naming the first key that is missing, empty or
                         not a string
    """
    for key in keys:
        value = config.get(key)
        if not value or not isinstance(value, str):
            raise ValidationError(
                f'Invalid config value for mandatory key "{key}". '
                f'Found "{_display(value)}" while expecting a "string".',
                key=key,
                value=value,
            )


def check_optional(
    config: Mapping[str, Any], key: str, expected: type, label: str
) -> None:
    """Check the type of an optional key when it holds a value.

    Falsy values (empty string, false, 0) count as absent.

    Raises:
        ValidationError: If the key is set to a value of another type
    """
    value = config.get(key)
    if not value:
        return
    if not isinstance(value, expected):
        raise ValidationError(
            f'Expecting {label} in "{key}" optional key. Found "{_display(value)}".',
            key=key,
            value=value,
        )


def _present(config: Mapping[str, Any], key: str) -> bool:
    return bool(config.get(key))


def validate_deployment_config(config: Mapping[str, Any]) -> DeploymentConfig:
    """Validate the ``config`` input and apply defaults.

    Defaults: namespace "default", release equal to app, no value files
    and no values. A numeric chartVersion is turned into its string form.
    """
    require_strings(config, DEPLOYMENT_REQUIRED_KEYS)
    for key in DEPLOYMENT_OPTIONAL_STRING_KEYS:
        check_optional(config, key, str, "string")
    check_optional(config, "valueFiles", list, "list")
    check_optional(config, "values", dict, "mapping")

    chart_version = config.get("chartVersion")
    if _is_scalar(chart_version):
        chart_version = str(chart_version)
    elif chart_version is not None:
        check_optional(config, "chartVersion", str, "string")

    return DeploymentConfig(
        app=config["app"],
        appUrl=config["appUrl"],
        chart=config["chart"],
        chartVersion=chart_version or None,
        namespace=config["namespace"]
        if _present(config, "namespace")
        else DeploymentConstants.DEFAULT_NAMESPACE,
        release=config["release"] if _present(config, "release") else config["app"],
        valueFiles=[str(f) for f in config.get("valueFiles") or []],
        values=dict(config.get("values") or {}),
    )


def validate_repository_config(config: Mapping[str, Any] | None) -> RepositoryConfig:
    """Validate the optional ``helm`` input.

    Every key is optional; numbers are accepted and turned into strings
    so unquoted YAML passwords work.
    """
    if not config:
        return RepositoryConfig()

    fields: dict[str, str] = {}
    for key in REPOSITORY_KEYS:
        value = config.get(key)
        if _is_scalar(value):
            value = str(value)
        if value is None or value == "":
            continue
        if not isinstance(value, str):
            raise ValidationError(
                f'Expecting string in "{key}" optional key. Found "{value}".',
                key=key,
                value=value,
            )
        fields[key] = value
    return RepositoryConfig(**fields)


def validate_sentry_config(config: Mapping[str, Any]) -> SentryConfig:
    """Validate the ``sentry`` input."""
    require_strings(config, SENTRY_REQUIRED_KEYS)
    return SentryConfig(authToken=config["authToken"], org=config["org"])


def validate_slack_config(config: Mapping[str, Any]) -> SlackConfig:
    """Validate the ``slack`` input."""
    require_strings(config, SLACK_REQUIRED_KEYS)
    return SlackConfig(token=config["token"], channel=config["channel"])


def validate_inputs(inputs: ActionInputs) -> ActionConfig:
    """Parse and validate every input of a run.

    The primary config is validated first, so a broken deployment config
    is reported before any optional group.

    Args:
        inputs: Raw text inputs

    Returns:
        ActionConfig ready to drive a run

    Raises:
        ParseError: If an input is neither JSON nor YAML, or not a mapping
        ValidationError: If a key is missing or has the wrong type
    """
    deployment = validate_deployment_config(parse_config(inputs.config))

    sentry = None
    if inputs.sentry:
        logger.debug(f"Parsing sentry config '{inputs.sentry}'...")
        sentry = validate_sentry_config(parse_config(inputs.sentry))

    slack = None
    if inputs.slack:
        logger.debug(f"Parsing slack config '{inputs.slack}'...")
        slack = validate_slack_config(parse_config(inputs.slack))

    # Repository config is only read when a deployment will run
    repository = RepositoryConfig()
    if inputs.helm and inputs.kubernetes:
        repository = validate_repository_config(parse_config(inputs.helm))

    return ActionConfig(
        deployment=deployment,
        environment=inputs.environment,
        token=inputs.token,
        kubernetes=inputs.kubernetes or None,
        repository=repository,
        sentry=sentry,
        slack=slack,
        version=inputs.version or None,
    )
