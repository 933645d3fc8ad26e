"""Release registration with error-tracking services."""

from .sentry import SentryReleaseRegistrar

__all__ = ["SentryReleaseRegistrar"]
