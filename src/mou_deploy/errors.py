"""Error types raised by the deployment action.

Every error derives from ActionError so the entrypoint can convert any of
them into a single failed run carrying ``message``.
"""

from __future__ import annotations

from typing import Any


class ActionError(Exception):
    """Base class for all action failures."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ParseError(ActionError):
    """Raised when an input cannot be decoded into a mapping."""

    def __init__(self, message: str, content: Any = None):
        self.content = content
        super().__init__(message)


class ValidationError(ActionError):
    """Raised when a configuration key is missing or has the wrong type."""

    def __init__(self, message: str, key: str, value: Any = None):
        self.key = key
        self.value = value
        super().__init__(message)


class DeploymentError(ActionError):
    """Raised when a Helm deployment stage fails.

    Attributes:
        stage: Failing stage ("repo-add", "repo-update" or "install")
        stderr: Captured standard error of the failing command
        stdout: Captured standard output of the failing command
        returncode: Exit status of the failing command
    """

    def __init__(
        self,
        message: str,
        details: str | None = None,
        *,
        stage: str | None = None,
        stderr: str | None = None,
        stdout: str | None = None,
        returncode: int | None = None,
    ):
        self.stage = stage
        self.stderr = stderr
        self.stdout = stdout
        self.returncode = returncode
        super().__init__(message, details)


class ReleaseRegistrationError(ActionError):
    """Raised when a Sentry release stage fails."""

    def __init__(self, message: str, details: str | None = None, *, stage: str):
        self.stage = stage
        super().__init__(message, details)


class NotificationError(ActionError):
    """Raised when Slack rejects a message."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response: dict[str, Any] | None = None,
    ):
        self.status_code = status_code
        self.response = response or {}
        super().__init__(message)
