"""Main CLI application module.

This module provides the entry point used by the GitHub Action. Each
action input maps to an option that can also be given through the
``INPUT_<NAME>`` environment variable the runner sets for action inputs.
"""

import os

import typer

from mou_deploy.config import ActionInputs
from mou_deploy.console import configure_logging, console, with_error_handling
from mou_deploy.context import build_action_context
from mou_deploy.orchestrator import run_action
from mou_deploy.utils import run_sync

app = typer.Typer(
    help="🚀 Deploy a Helm chart, notify Slack and register a Sentry release",
    no_args_is_help=False,
    rich_markup_mode="rich",
)


@app.command()
@with_error_handling
def deploy(
    config: str = typer.Option(
        ...,
        "--config",
        envvar="INPUT_CONFIG",
        help="Deployment config (JSON or YAML): app, appUrl, chart, ...",
    ),
    environment: str = typer.Option(
        ..., "--environment", envvar="INPUT_ENVIRONMENT", help="Deployment environment"
    ),
    token: str = typer.Option(
        ..., "--token", envvar="INPUT_TOKEN", help="GitHub API token"
    ),
    kubernetes: str = typer.Option(
        None,
        "--kubernetes",
        envvar="INPUT_KUBERNETES",
        help="Kubeconfig contents for the target cluster",
    ),
    helm: str = typer.Option(
        None,
        "--helm",
        envvar="INPUT_HELM",
        help="Chart repository config (JSON or YAML): name, url, username, password",
    ),
    sentry: str = typer.Option(
        None,
        "--sentry",
        envvar="INPUT_SENTRY",
        help="Sentry config (JSON or YAML): authToken, org",
    ),
    slack: str = typer.Option(
        None,
        "--slack",
        envvar="INPUT_SLACK",
        help="Slack config (JSON or YAML): token, channel",
    ),
    version: str = typer.Option(
        None, "--version", envvar="INPUT_VERSION", help="Release version override"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show debug logs (also enabled by RUNNER_DEBUG=1)"
    ),
) -> None:
    """
    🚀 Deploy the application and report the outcome.

    Steps:
    - Deploy the chart with Helm (when --kubernetes is given)
    - Notify Slack about success or failure (when --slack is given)
    - Register the release in Sentry (when --sentry is given)
    """
    configure_logging(debug or os.getenv("RUNNER_DEBUG") == "1")

    inputs = ActionInputs(
        config=config,
        environment=environment,
        token=token,
        kubernetes=kubernetes,
        helm=helm,
        sentry=sentry,
        slack=slack,
        version=version,
    )
    run_sync(run_action(inputs, build_action_context()))
    console.ok(f"Finished {environment} deployment")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
