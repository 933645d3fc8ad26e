"""Tests for sentry-cli release commands."""

from unittest.mock import MagicMock

import pytest

from mou_deploy.shell_commands.sentry_cli import SentryCliCommands

PREFIX = ["sentry-cli", "--auth-token", "myToken", "releases", "--org", "myOrg"]


class TestSentryCliCommands:
    """Tests for release creation, commits and deploys."""

    @pytest.fixture
    def sentry(self, mock_runner: MagicMock) -> SentryCliCommands:
        return SentryCliCommands(mock_runner)

    def test_new_release(
        self, sentry: SentryCliCommands, mock_runner: MagicMock
    ) -> None:
        """A release is created for the application project."""
        result = sentry.new_release("myToken", "myOrg", "myApp", "1.0.0")

        assert result.success
        assert mock_runner.run.call_args[0][0] == [
            *PREFIX,
            "new",
            "-p",
            "myApp",
            "1.0.0",
        ]

    def test_set_commits(
        self, sentry: SentryCliCommands, mock_runner: MagicMock
    ) -> None:
        """Commits are detected automatically."""
        sentry.set_commits("myToken", "myOrg", "1.0.0")

        assert mock_runner.run.call_args[0][0] == [
            *PREFIX,
            "set-commits",
            "--auto",
            "1.0.0",
        ]

    def test_new_deploy(
        self, sentry: SentryCliCommands, mock_runner: MagicMock
    ) -> None:
        """The deploy is recorded for the environment."""
        sentry.new_deploy("myToken", "myOrg", "1.0.0", "staging")

        assert mock_runner.run.call_args[0][0] == [
            *PREFIX,
            "deploys",
            "1.0.0",
            "new",
            "-e",
            "staging",
        ]
