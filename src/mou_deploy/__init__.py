"""Helm deployment action with Slack notifications and Sentry releases."""

__version__ = "1.0.0"
